"""
Listing envelope decoding.

Wire shape of one page:

    {"kind": "Listing",
     "data": {"children": [{"kind": "t3", "data": {...}}, ...],
              "after": "t3_abc" | null,
              "before": "t3_xyz" | null}}

Every child is an enveloped thing whose ``kind`` picks the concrete model.
A user overview interleaves ``t3`` and ``t1`` children in one page, so a
decoded page keeps each child's own type instead of assuming one shape.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from reddit_fetcher.models import (
    Comment,
    Message,
    MoreComments,
    Redditor,
    Submission,
    Subreddit,
    Trophy,
)
from reddit_fetcher.utils.exceptions import ListingDecodeError
from reddit_fetcher.utils.logging_config import get_logger

logger = get_logger("listing")


class Kind:
    """Type prefixes used by the API."""
    COMMENT = "t1"
    ACCOUNT = "t2"
    LINK = "t3"
    MESSAGE = "t4"
    SUBREDDIT = "t5"
    TROPHY = "t6"
    MORE = "more"
    LISTING = "Listing"


@dataclass
class UnknownItem:
    """
    A child whose kind has no decoder, or whose data could not be decoded.
    Kept in place so the rest of the page stays intact and in order.
    """
    kind: str
    data: Any = field(default=None, repr=False)
    reason: str = "unknown kind"


# kind -> decoder for its ``data`` object
_DECODERS: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
    Kind.COMMENT: Comment.from_dict,
    Kind.ACCOUNT: Redditor.from_dict,
    Kind.LINK: Submission.from_dict,
    Kind.MESSAGE: Message.from_dict,
    Kind.SUBREDDIT: Subreddit.from_dict,
    Kind.TROPHY: Trophy.from_dict,
    Kind.MORE: MoreComments.from_dict,
}


def register_kind(kind: str, decoder: Callable[[Mapping[str, Any]], Any]) -> None:
    """Register (or replace) the decoder used for ``kind``."""
    _DECODERS[kind] = decoder


def decode_thing(child: Any, decoders: Optional[Mapping[str, Callable]] = None) -> Any:
    """
    Decode one ``{kind, data}`` envelope into its model.

    Never raises: anything that cannot be decoded comes back as an UnknownItem.

    Args:
        child: Enveloped thing from a listing's ``children``
        decoders: Per-kind overrides, consulted before the registry

    Returns:
        The decoded model or an UnknownItem
    """
    if not isinstance(child, Mapping):
        logger.warning(f"Skipping malformed listing child of type {type(child).__name__}")
        return UnknownItem(kind="", data=child, reason="not an envelope")

    kind = str(child.get("kind") or "")
    data = child.get("data")

    decoder = None
    if decoders is not None:
        decoder = decoders.get(kind)
    if decoder is None:
        decoder = _DECODERS.get(kind)

    if decoder is None:
        logger.warning(f"No decoder for kind '{kind}', keeping it as UnknownItem")
        return UnknownItem(kind=kind, data=data)

    if not isinstance(data, Mapping):
        logger.warning(f"Listing child of kind '{kind}' has no data object")
        return UnknownItem(kind=kind, data=data, reason="missing data")

    try:
        return decoder(data)
    except (TypeError, ValueError, AttributeError, KeyError) as e:
        logger.warning(f"Failed to decode child of kind '{kind}': {e}")
        return UnknownItem(kind=kind, data=data, reason=str(e))


@dataclass
class Listing:
    """One page: ordered decoded children plus the server's cursor tokens."""
    children: List[Any] = field(default_factory=list)
    after: Optional[str] = None
    before: Optional[str] = None

    def __len__(self) -> int:
        return len(self.children)

    @classmethod
    def from_json(
        cls,
        payload: Any,
        decoders: Optional[Mapping[str, Callable]] = None,
    ) -> "Listing":
        """
        Decode a wire page.

        Args:
            payload: Parsed JSON of a listing response
            decoders: Per-kind decoder overrides (e.g. inbox maps ``t1`` to Message)

        Returns:
            Listing with decoded children

        Raises:
            ListingDecodeError: payload is not a listing envelope
        """
        if not isinstance(payload, Mapping):
            raise ListingDecodeError(
                f"Expected listing object, got {type(payload).__name__}",
                payload_type=type(payload).__name__,
            )

        kind = payload.get("kind")
        if kind is not None and kind != Kind.LISTING:
            raise ListingDecodeError(f"Expected kind 'Listing', got '{kind}'", payload_type=str(kind))

        data = payload.get("data")
        if not isinstance(data, Mapping):
            raise ListingDecodeError("Listing has no data object", payload_type=str(kind))

        raw_children = data.get("children") or []
        if not isinstance(raw_children, list):
            raise ListingDecodeError("Listing children is not a list", payload_type=str(kind))

        return cls(
            children=[decode_thing(child, decoders) for child in raw_children],
            after=data.get("after") or None,
            before=data.get("before") or None,
        )


def map_listing(listing: Optional[Listing]) -> List[Any]:
    """
    Flatten a listing into its items. Pure: no I/O, no mutation.

    Args:
        listing: Decoded page, or None when there was nothing to decode

    Returns:
        Items in page order, unknown kinds included; empty list for None
    """
    if listing is None:
        return []
    return list(listing.children)
