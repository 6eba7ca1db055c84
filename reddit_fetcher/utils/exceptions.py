"""
Custom exceptions for Reddit fetcher.

Exception Hierarchy:
    RedditFetcherError (base)
    ├── RedditAPIError
    │   ├── RateLimitExceededError
    │   └── AuthenticationError
    ├── NetworkTimeoutError
    ├── NetworkError
    ├── ListingDecodeError
    └── MissingStateError
"""

from typing import Optional


class RedditFetcherError(Exception):
    """Base exception for Reddit fetcher errors."""
    pass


class RedditAPIError(RedditFetcherError):
    """Non-success response from the Reddit API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        response_body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.endpoint = endpoint
        self.response_body = response_body
        super().__init__(message)


class RateLimitExceededError(RedditAPIError):
    """Rate limit exceeded (HTTP 429). Surfaced as-is, never retried."""

    def __init__(self, endpoint: Optional[str] = None, response_body: Optional[str] = None):
        super().__init__(
            "Rate limit exceeded",
            status_code=429,
            endpoint=endpoint,
            response_body=response_body
        )


class AuthenticationError(RedditAPIError):
    """Access token rejected (HTTP 401/403)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, endpoint=endpoint)


class NetworkTimeoutError(RedditFetcherError):
    """Network request timed out."""

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        self.endpoint = endpoint
        self.timeout = timeout
        message = f"Request timed out after {timeout}s" if timeout else "Request timed out"
        super().__init__(message)


class NetworkError(RedditFetcherError):
    """Request could not be delivered (DNS, connection refused, TLS...)."""

    def __init__(self, endpoint: Optional[str] = None, reason: Optional[str] = None):
        self.endpoint = endpoint
        message = f"Request to {endpoint} failed" if endpoint else "Request failed"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class ListingDecodeError(RedditFetcherError):
    """Payload does not have the shape of a listing."""

    def __init__(self, message: str, payload_type: Optional[str] = None):
        self.payload_type = payload_type
        super().__init__(message)


class MissingStateError(RedditFetcherError):
    """A handler needs state it could not resolve (e.g. the logged-in user)."""

    def __init__(self, message: str, missing: Optional[str] = None):
        self.missing = missing
        super().__init__(message)
