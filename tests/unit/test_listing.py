"""
Unit tests for listing decoding and the domain models it produces.
"""

import pytest

from reddit_fetcher.listing import (
    Kind,
    Listing,
    UnknownItem,
    decode_thing,
    map_listing,
    register_kind,
    _DECODERS,
)
from reddit_fetcher.models import (
    Comment,
    Message,
    MoreComments,
    Submission,
    Subreddit,
    Vote,
)
from reddit_fetcher.utils.exceptions import ListingDecodeError


class TestListingFromJson:
    """Test Listing.from_json."""

    def test_decodes_submissions_and_tokens(self, sample_submissions_listing):
        listing = Listing.from_json(sample_submissions_listing)

        assert len(listing) == 3
        assert all(isinstance(s, Submission) for s in listing.children)
        assert listing.after == "t3_s3"
        assert listing.before is None

    def test_mixed_overview_keeps_types_and_order(self, sample_overview_listing):
        items = map_listing(Listing.from_json(sample_overview_listing))

        assert len(items) == 2
        assert isinstance(items[0], Submission)
        assert isinstance(items[1], Comment)
        assert items[0].fullname == "t3_s1"
        assert items[1].fullname == "t1_c2"

    def test_empty_string_tokens_are_absent(self, listing_factory):
        payload = listing_factory([])
        payload["data"]["after"] = ""
        payload["data"]["before"] = ""

        listing = Listing.from_json(payload)

        assert listing.after is None
        assert listing.before is None

    def test_missing_children_is_empty_page(self):
        listing = Listing.from_json({"kind": "Listing", "data": {"after": None}})
        assert listing.children == []

    def test_kind_may_be_omitted(self, listing_factory):
        payload = listing_factory([])
        del payload["kind"]
        assert Listing.from_json(payload).children == []

    @pytest.mark.parametrize("payload", [
        None,
        [],
        "Listing",
        {"kind": "t3", "data": {}},
        {"kind": "Listing"},
        {"kind": "Listing", "data": {"children": "t3_abc"}},
    ])
    def test_rejects_non_listing_payloads(self, payload):
        with pytest.raises(ListingDecodeError):
            Listing.from_json(payload)

    def test_decoder_override(self, sample_inbox_listing):
        listing = Listing.from_json(
            sample_inbox_listing,
            decoders={Kind.COMMENT: Message.from_dict, Kind.MESSAGE: Message.from_dict},
        )
        assert [type(m) for m in listing.children] == [Message, Message]
        assert listing.children[1].was_comment is True


class TestDecodeThing:
    """Test decoding of single enveloped things."""

    def test_unknown_kind_is_kept_in_place(self, listing_factory, sample_overview_listing):
        children = sample_overview_listing["data"]["children"]
        payload = listing_factory([children[0], {"kind": "t9", "data": {"id": "x"}}, children[1]])

        items = map_listing(Listing.from_json(payload))

        assert len(items) == 3
        assert isinstance(items[1], UnknownItem)
        assert items[1].kind == "t9"
        assert items[1].data == {"id": "x"}
        assert isinstance(items[2], Comment)

    def test_child_that_is_not_an_object(self):
        item = decode_thing("t3_abc")
        assert isinstance(item, UnknownItem)
        assert item.reason == "not an envelope"

    def test_known_kind_without_data(self):
        item = decode_thing({"kind": "t3", "data": None})
        assert isinstance(item, UnknownItem)
        assert item.kind == "t3"
        assert item.reason == "missing data"

    def test_decoder_error_becomes_unknown_item(self):
        def broken(data):
            raise ValueError("bad payload")

        item = decode_thing({"kind": "t3", "data": {}}, decoders={"t3": broken})

        assert isinstance(item, UnknownItem)
        assert item.reason == "bad payload"

    def test_register_kind(self):
        original = _DECODERS.get("modaction")
        try:
            register_kind("modaction", lambda data: ("modaction", data["id"]))
            assert decode_thing({"kind": "modaction", "data": {"id": "m1"}}) == ("modaction", "m1")
        finally:
            if original is None:
                _DECODERS.pop("modaction", None)
            else:
                _DECODERS["modaction"] = original

    def test_subreddit_kind(self, sample_subreddits_listing):
        item = decode_thing(sample_subreddits_listing["data"]["children"][0])
        assert isinstance(item, Subreddit)
        assert item.display_name == "python"
        assert item.subscribers == 1200000


class TestMapListing:
    """Test map_listing."""

    def test_none_maps_to_empty_list(self):
        assert map_listing(None) == []

    def test_returns_a_copy(self):
        listing = Listing(children=[1, 2, 3])
        items = map_listing(listing)
        items.append(4)
        assert listing.children == [1, 2, 3]


class TestModels:
    """Test model decoding details."""

    def test_comment_replies_and_more(self, sample_comments_payload):
        listing = Listing.from_json(sample_comments_payload[1])

        first, nested, more = listing.children

        assert first.replies == []
        assert first.likes == Vote.UPVOTE
        assert len(nested.replies) == 1
        assert nested.replies[0].fullname == "t1_c4"
        assert isinstance(more, MoreComments)
        assert more.count == 12
        assert more.children == ["c9", "c10"]

    def test_submission_defaults_for_missing_fields(self):
        submission = Submission.from_dict({"id": "x", "name": "t3_x", "score": None, "likes": False})

        assert submission.title == ""
        assert submission.score == 0
        assert submission.created_utc is None
        assert submission.likes == Vote.DOWNVOTE
        assert submission.raw["id"] == "x"

    def test_nested_reply_of_unknown_kind_is_kept(self):
        comment = Comment.from_dict({
            "id": "c1",
            "name": "t1_c1",
            "replies": {
                "kind": "Listing",
                "data": {
                    "children": [
                        {"kind": "t1", "data": {"id": "c2", "name": "t1_c2"}},
                        {"kind": "t9", "data": {"id": "z1"}},
                        {"kind": "more", "data": {"id": "m1", "name": "t1_m1", "count": 3, "children": ["c7"]}},
                    ],
                },
            },
        })

        reply, unknown, more = comment.replies
        assert isinstance(reply, Comment)
        assert reply.fullname == "t1_c2"
        assert isinstance(unknown, UnknownItem)
        assert unknown.kind == "t9"
        assert unknown.data == {"id": "z1"}
        assert isinstance(more, MoreComments)

    def test_nested_reply_uses_registered_decoder(self, monkeypatch):
        monkeypatch.setitem(_DECODERS, "t9", lambda data: ("custom", data["id"]))

        comment = Comment.from_dict({
            "id": "c1",
            "name": "t1_c1",
            "replies": {"kind": "Listing", "data": {"children": [{"kind": "t9", "data": {"id": "z1"}}]}},
        })

        assert comment.replies == [("custom", "z1")]
