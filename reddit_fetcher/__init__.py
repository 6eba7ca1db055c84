"""
Reddit Fetcher - paginated, authenticated access to Reddit listings.

Usage:
    from reddit_fetcher import RedditClient, StaticTokenBearer, SubmissionSorting, TimePeriod

    with RedditClient(StaticTokenBearer(token)) as client:
        fetcher = client.submissions("python", sorting=SubmissionSorting.TOP,
                                     time_period=TimePeriod.LAST_WEEK)
        first = fetcher.fetch_next()
        second = fetcher.fetch_next()
        fetcher.set_sorting(SubmissionSorting.NEW)   # restarts the traversal
        fresh = fetcher.fetch_next()

Architecture:
    RedditClient → handlers → Fetchers (Submissions, Comments, Contributions, Inbox, Subreddits)
                                   ↓
                            Fetcher pager (after/before tokens, running count)
                                   ↓
                            RedditApi (httpx) → Listing envelope → typed items
"""

from reddit_fetcher.config import get_config, set_config, load_config, Config
from reddit_fetcher.auth import AuthHeaderSupplier, HeaderSource, StaticTokenBearer, TokenBearer
from reddit_fetcher.api import RedditApi
from reddit_fetcher.client import RedditClient
from reddit_fetcher.listing import Kind, Listing, UnknownItem, decode_thing, map_listing, register_kind
from reddit_fetcher.fetchers import (
    DEFAULT_LIMIT,
    Fetcher,
    PageRequest,
    SubmissionsFetcher,
    CommentsFetcher,
    ContributionsFetcher,
    InboxFetcher,
    SubredditsFetcher,
)
from reddit_fetcher.models import (
    Comment,
    CommentsSorting,
    ContributionSorting,
    Me,
    Message,
    MoreComments,
    Redditor,
    Submission,
    SubmissionSorting,
    Subreddit,
    SubredditRule,
    TimePeriod,
    Trophy,
    Vote,
    WikiPage,
)
from reddit_fetcher.utils.exceptions import (
    RedditFetcherError,
    RedditAPIError,
    RateLimitExceededError,
    AuthenticationError,
    NetworkTimeoutError,
    NetworkError,
    ListingDecodeError,
    MissingStateError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "get_config",
    "set_config",
    "load_config",
    "Config",

    # Auth
    "AuthHeaderSupplier",
    "HeaderSource",
    "StaticTokenBearer",
    "TokenBearer",

    # Client / transport
    "RedditClient",
    "RedditApi",

    # Listing envelope
    "Kind",
    "Listing",
    "UnknownItem",
    "decode_thing",
    "map_listing",
    "register_kind",

    # Fetchers
    "DEFAULT_LIMIT",
    "Fetcher",
    "PageRequest",
    "SubmissionsFetcher",
    "CommentsFetcher",
    "ContributionsFetcher",
    "InboxFetcher",
    "SubredditsFetcher",

    # Models
    "Comment",
    "CommentsSorting",
    "ContributionSorting",
    "Me",
    "Message",
    "MoreComments",
    "Redditor",
    "Submission",
    "SubmissionSorting",
    "Subreddit",
    "SubredditRule",
    "TimePeriod",
    "Trophy",
    "Vote",
    "WikiPage",

    # Errors
    "RedditFetcherError",
    "RedditAPIError",
    "RateLimitExceededError",
    "AuthenticationError",
    "NetworkTimeoutError",
    "NetworkError",
    "ListingDecodeError",
    "MissingStateError",
]
