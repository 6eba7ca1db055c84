"""
Domain models for Reddit things.

Only the fields the fetchers and the command line need are lifted out of the
payload; everything else stays reachable through ``raw``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


# =============================================================================
# Sorting / filtering enums
# =============================================================================

class TimePeriod(Enum):
    """Time window accepted by time-scoped sort orders (``t`` parameter)."""
    LAST_HOUR = "hour"
    LAST_DAY = "day"
    LAST_WEEK = "week"
    LAST_MONTH = "month"
    LAST_YEAR = "year"
    ALL_TIME = "all"


class SubmissionSorting(Enum):
    HOT = ("hot", False)
    NEW = ("new", False)
    RISING = ("rising", False)
    BEST = ("best", False)
    TOP = ("top", True)
    CONTROVERSIAL = ("controversial", True)

    def __init__(self, sorting_str: str, requires_time_period: bool):
        self.sorting_str = sorting_str
        self.requires_time_period = requires_time_period


class ContributionSorting(Enum):
    HOT = ("hot", False)
    NEW = ("new", False)
    TOP = ("top", True)
    CONTROVERSIAL = ("controversial", True)

    def __init__(self, sorting_str: str, requires_time_period: bool):
        self.sorting_str = sorting_str
        self.requires_time_period = requires_time_period


class CommentsSorting(Enum):
    """Comment tree orders. None of them is time-scoped."""
    CONFIDENCE = "confidence"
    TOP = "top"
    NEW = "new"
    CONTROVERSIAL = "controversial"
    OLD = "old"
    QA = "qa"

    @property
    def sorting_str(self) -> str:
        return self.value

    @property
    def requires_time_period(self) -> bool:
        return False


class Vote(Enum):
    UPVOTE = 1
    NONE = 0
    DOWNVOTE = -1

    @property
    def dir(self) -> int:
        return self.value


# =============================================================================
# Helpers
# =============================================================================

def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key, default)
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _likes_to_vote(likes: Any) -> Vote:
    if likes is True:
        return Vote.UPVOTE
    if likes is False:
        return Vote.DOWNVOTE
    return Vote.NONE


# =============================================================================
# Contributions (votable, saveable)
# =============================================================================

@dataclass
class Submission:
    """A link or self post (kind ``t3``)."""
    id: str
    fullname: str
    title: str
    author: str
    subreddit: str
    score: int
    num_comments: int
    url: str
    permalink: str
    selftext: str
    is_self: bool
    created_utc: Optional[float]
    likes: Vote = Vote.NONE
    saved: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Submission":
        return cls(
            id=_str(data, "id"),
            fullname=_str(data, "name"),
            title=_str(data, "title"),
            author=_str(data, "author"),
            subreddit=_str(data, "subreddit"),
            score=_int(data, "score"),
            num_comments=_int(data, "num_comments"),
            url=_str(data, "url"),
            permalink=_str(data, "permalink"),
            selftext=_str(data, "selftext"),
            is_self=bool(data.get("is_self", False)),
            created_utc=_float(data, "created_utc"),
            likes=_likes_to_vote(data.get("likes")),
            saved=bool(data.get("saved", False)),
            raw=dict(data),
        )


@dataclass
class Comment:
    """A comment (kind ``t1``). ``replies`` holds already-expanded children."""
    id: str
    fullname: str
    author: str
    body: str
    subreddit: str
    link_id: str
    parent_id: str
    score: int
    depth: int
    created_utc: Optional[float]
    likes: Vote = Vote.NONE
    saved: bool = False
    replies: List[Any] = field(default_factory=list, repr=False)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Comment":
        return cls(
            id=_str(data, "id"),
            fullname=_str(data, "name"),
            author=_str(data, "author"),
            body=_str(data, "body"),
            subreddit=_str(data, "subreddit"),
            link_id=_str(data, "link_id"),
            parent_id=_str(data, "parent_id"),
            score=_int(data, "score"),
            depth=_int(data, "depth"),
            created_utc=_float(data, "created_utc"),
            likes=_likes_to_vote(data.get("likes")),
            saved=bool(data.get("saved", False)),
            replies=_decode_replies(data.get("replies")),
            raw=dict(data),
        )


@dataclass
class MoreComments:
    """Placeholder for a collapsed part of a comment tree (kind ``more``)."""
    id: str
    fullname: str
    parent_id: str
    count: int
    depth: int
    children: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MoreComments":
        return cls(
            id=_str(data, "id"),
            fullname=_str(data, "name"),
            parent_id=_str(data, "parent_id"),
            count=_int(data, "count"),
            depth=_int(data, "depth"),
            children=[str(c) for c in data.get("children") or []],
        )


Contribution = Union[Submission, Comment]
Votable = Union[Submission, Comment]


def _decode_replies(replies: Any) -> List[Any]:
    # The API sends "" instead of a listing when a comment has no replies
    if not isinstance(replies, Mapping):
        return []
    # listing imports this module, so the registry is looked up at call time
    from reddit_fetcher.listing import decode_thing

    children = (replies.get("data") or {}).get("children") or []
    return [decode_thing(child) for child in children]


# =============================================================================
# Inbox
# =============================================================================

@dataclass
class Message:
    """
    An inbox entry. Private messages arrive as ``t4``; comment replies and
    mentions arrive as ``t1`` with ``was_comment`` set.
    """
    id: str
    fullname: str
    author: str
    dest: str
    subject: str
    body: str
    new: bool
    was_comment: bool
    context: str
    created_utc: Optional[float]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        return cls(
            id=_str(data, "id"),
            fullname=_str(data, "name"),
            author=_str(data, "author"),
            dest=_str(data, "dest"),
            subject=_str(data, "subject"),
            body=_str(data, "body"),
            new=bool(data.get("new", False)),
            was_comment=bool(data.get("was_comment", False)),
            context=_str(data, "context"),
            created_utc=_float(data, "created_utc"),
            raw=dict(data),
        )


# =============================================================================
# Subreddits, accounts, misc
# =============================================================================

@dataclass
class Subreddit:
    """A community (kind ``t5``)."""
    id: str
    fullname: str
    display_name: str
    title: str
    public_description: str
    subscribers: int
    over18: bool
    url: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subreddit":
        return cls(
            id=_str(data, "id"),
            fullname=_str(data, "name"),
            display_name=_str(data, "display_name"),
            title=_str(data, "title"),
            public_description=_str(data, "public_description"),
            subscribers=_int(data, "subscribers"),
            over18=bool(data.get("over18", False)),
            url=_str(data, "url"),
            raw=dict(data),
        )


@dataclass
class Redditor:
    """Another user's public account (kind ``t2``)."""
    id: str
    name: str
    link_karma: int
    comment_karma: int
    created_utc: Optional[float]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def fullname(self) -> str:
        return f"t2_{self.id}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Redditor":
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            link_karma=_int(data, "link_karma"),
            comment_karma=_int(data, "comment_karma"),
            created_utc=_float(data, "created_utc"),
            raw=dict(data),
        )


@dataclass
class Me(Redditor):
    """The logged-in account, as returned by ``/api/v1/me``."""
    inbox_count: int = 0
    has_mail: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Me":
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            link_karma=_int(data, "link_karma"),
            comment_karma=_int(data, "comment_karma"),
            created_utc=_float(data, "created_utc"),
            raw=dict(data),
            inbox_count=_int(data, "inbox_count"),
            has_mail=bool(data.get("has_mail", False)),
        )


Account = Union[Redditor, Me]


@dataclass
class Trophy:
    name: str
    description: str
    award_id: str
    icon_70: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Trophy":
        return cls(
            name=_str(data, "name"),
            description=_str(data, "description"),
            award_id=_str(data, "award_id"),
            icon_70=_str(data, "icon_70"),
        )


@dataclass
class SubredditRule:
    short_name: str
    description: str
    kind: str
    priority: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubredditRule":
        return cls(
            short_name=_str(data, "short_name"),
            description=_str(data, "description"),
            kind=_str(data, "kind"),
            priority=_int(data, "priority"),
        )


@dataclass
class WikiPage:
    content_md: str
    revision_date: Optional[float]
    may_revise: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WikiPage":
        return cls(
            content_md=_str(data, "content_md"),
            revision_date=_float(data, "revision_date"),
            may_revise=bool(data.get("may_revise", False)),
        )
