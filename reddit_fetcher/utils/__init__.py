"""
Utility modules for Reddit fetcher.
"""

from reddit_fetcher.utils.logging_config import get_logger, set_log_level, setup_file_logging
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

__all__ = [
    "get_logger",
    "set_log_level",
    "setup_file_logging",
    "RedditFetcherError",
    "RedditAPIError",
    "RateLimitExceededError",
    "AuthenticationError",
    "NetworkTimeoutError",
    "NetworkError",
    "ListingDecodeError",
    "MissingStateError",
]
