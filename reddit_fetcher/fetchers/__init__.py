"""
Fetchers module - Paginated listing fetchers.

Every fetcher is a thin specialization of the Fetcher pager: it knows which
endpoint to call and with which filters, the pager does the rest.

Exports:
    - Fetcher, PageRequest, DEFAULT_LIMIT: the generic pager
    - SubmissionsFetcher: posts of a subreddit or the front page
    - CommentsFetcher: comments of a submission
    - ContributionsFetcher: a user's overview / submitted / comments / ...
    - InboxFetcher: message folders
    - SubredditsFetcher: the user's subreddits
"""

from reddit_fetcher.fetchers.base import (
    DEFAULT_LIMIT,
    Fetcher,
    PageRequest,
    ResourceFetcher,
    SortedFetcher,
    TimeScopedFetcher,
)
from reddit_fetcher.fetchers.submissions import SubmissionsFetcher
from reddit_fetcher.fetchers.comments import CommentsFetcher
from reddit_fetcher.fetchers.contributions import ContributionsFetcher
from reddit_fetcher.fetchers.inbox import InboxFetcher
from reddit_fetcher.fetchers.subreddits import SubredditsFetcher

__all__ = [
    "DEFAULT_LIMIT",
    "Fetcher",
    "PageRequest",
    "ResourceFetcher",
    "SortedFetcher",
    "TimeScopedFetcher",
    "SubmissionsFetcher",
    "CommentsFetcher",
    "ContributionsFetcher",
    "InboxFetcher",
    "SubredditsFetcher",
]
