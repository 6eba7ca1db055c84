"""
Reddit API transport.

Thin httpx wrapper: one method per endpoint, returning parsed JSON. Status
and network failures are translated into the package's exception types;
nothing is retried here.
"""

import httpx
from typing import Any, Dict, Mapping, Optional

from reddit_fetcher.config import get_config, Config
from reddit_fetcher.utils.logging_config import get_logger
from reddit_fetcher.utils.exceptions import (
    RedditAPIError,
    RateLimitExceededError,
    AuthenticationError,
    NetworkTimeoutError,
    NetworkError,
)

logger = get_logger("api")


def _clean(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop absent values so they are omitted rather than sent empty."""
    return {k: v for k, v in params.items() if v is not None}


class RedditApi:
    """
    Endpoint calls against the OAuth API host.

    Every call takes the header map for that single request; the API object
    itself holds no credentials.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        config: Optional[Config] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the API transport.

        Args:
            timeout: Request timeout in seconds
            config: Config object
            transport: Optional httpx transport (mainly for tests)
        """
        self._config = config or get_config()

        if timeout is None:
            timeout = self._config.api.timeout
        self._timeout = timeout

        self.client = httpx.Client(
            base_url=self._config.api.base_url,
            timeout=httpx.Timeout(timeout, connect=self._config.api.connect_timeout),
            headers={
                "User-Agent": self._config.api.user_agent,
                "Accept": "application/json",
            },
            transport=transport,
        )

    def close(self):
        """Close HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        headers: Mapping[str, str],
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        query = {"raw_json": 1}
        if params:
            query.update(_clean(params))

        logger.debug(f"{method} {endpoint} params={query}")

        try:
            if method == "GET":
                response = self.client.get(endpoint, params=query, headers=dict(headers))
            else:
                response = self.client.post(
                    endpoint,
                    params=query,
                    data=_clean(data or {}),
                    headers=dict(headers),
                )
            response.raise_for_status()
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"Non-JSON response from {endpoint}: {response.status_code}")
                raise RedditAPIError(
                    f"Response from {endpoint} is not JSON",
                    status_code=response.status_code,
                    endpoint=endpoint,
                    response_body=response.text
                ) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                logger.warning(f"Rate limit exceeded on {endpoint}")
                raise RateLimitExceededError(
                    endpoint=endpoint,
                    response_body=e.response.text
                )
            if status in (401, 403):
                logger.error(f"Access denied on {endpoint}: {status}")
                raise AuthenticationError(
                    f"Access denied: {status}",
                    status_code=status,
                    endpoint=endpoint
                )
            logger.error(f"HTTP error on {endpoint}: {status}")
            raise RedditAPIError(
                f"Request to {endpoint} failed: {status}",
                status_code=status,
                endpoint=endpoint,
                response_body=e.response.text
            )

        except httpx.TimeoutException as e:
            logger.error(f"Timeout on {endpoint}: {e}")
            raise NetworkTimeoutError(endpoint=endpoint, timeout=self._timeout)

        except httpx.RequestError as e:
            logger.error(f"Request error on {endpoint}: {e}")
            raise NetworkError(endpoint=endpoint, reason=str(e))

    def _get(self, endpoint: str, headers: Mapping[str, str], **params) -> Any:
        return self._request("GET", endpoint, headers, params=params)

    def _post(self, endpoint: str, headers: Mapping[str, str], **data) -> Any:
        return self._request("POST", endpoint, headers, data=data)

    # =========================================================================
    # Paged listings
    # =========================================================================

    def fetch_submissions(
        self,
        subreddit: str,
        sorting: str,
        headers: Mapping[str, str],
        time_period: Optional[str] = None,
        limit: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        """
        Fetch a page of submissions.

        Args:
            subreddit: Subreddit name; empty string means the front page
            sorting: hot, new, top, ...
            headers: Authorization headers for this request
            time_period: ``t`` window, only meaningful for time-scoped sorts
            limit: Page size
            count: Items already seen in this direction
            after: Forward cursor token
            before: Backward cursor token

        Returns:
            Listing JSON
        """
        endpoint = f"/r/{subreddit}/{sorting}" if subreddit else f"/{sorting}"
        return self._get(
            endpoint, headers,
            t=time_period, limit=limit, count=count, after=after, before=before,
        )

    def fetch_comments(
        self,
        submission_id: str,
        headers: Mapping[str, str],
        sorting: Optional[str] = None,
        limit: Optional[int] = None,
        depth: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        """
        Fetch a submission's comment tree.

        Returns:
            Two-element JSON array: [submission listing, comments listing]
        """
        return self._get(
            f"/comments/{submission_id}", headers,
            sort=sorting, limit=limit, depth=depth, count=count, after=after, before=before,
        )

    def fetch_user_overview(
        self,
        username: str,
        sorting: str,
        headers: Mapping[str, str],
        time_period: Optional[str] = None,
        limit: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        """Fetch a page of a user's mixed submissions and comments."""
        return self._get(
            f"/user/{username}/overview", headers,
            sort=sorting, t=time_period, limit=limit, count=count, after=after, before=before,
        )

    def fetch_user_info(
        self,
        username: str,
        where: str,
        sorting: str,
        headers: Mapping[str, str],
        time_period: Optional[str] = None,
        limit: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        """Fetch a page of one of a user's contribution lists (submitted, saved...)."""
        return self._get(
            f"/user/{username}/{where}", headers,
            sort=sorting, t=time_period, limit=limit, count=count, after=after, before=before,
        )

    def fetch_inbox(
        self,
        where: str,
        headers: Mapping[str, str],
        limit: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        return self._get(
            f"/message/{where}", headers,
            limit=limit, count=count, after=after, before=before,
        )

    def fetch_subreddits(
        self,
        where: str,
        headers: Mapping[str, str],
        limit: Optional[int] = None,
        count: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        return self._get(
            f"/subreddits/mine/{where}", headers,
            limit=limit, count=count, after=after, before=before,
        )

    # =========================================================================
    # Single lookups
    # =========================================================================

    def me(self, headers: Mapping[str, str]) -> Any:
        return self._get("/api/v1/me", headers)

    def user(self, username: str, headers: Mapping[str, str]) -> Any:
        return self._get(f"/user/{username}/about", headers)

    def subreddit(self, subreddit: str, headers: Mapping[str, str]) -> Any:
        return self._get(f"/r/{subreddit}/about", headers)

    def submission(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._get(f"/by_id/{fullname}", headers)

    def comment(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._get("/api/info", headers, id=fullname)

    def wiki(self, subreddit: str, headers: Mapping[str, str], page: str = "index") -> Any:
        return self._get(f"/r/{subreddit}/wiki/{page}", headers)

    def rules(self, subreddit: str, headers: Mapping[str, str]) -> Any:
        return self._get(f"/r/{subreddit}/about/rules", headers)

    def user_trophies(self, username: str, headers: Mapping[str, str]) -> Any:
        return self._get(f"/api/v1/user/{username}/trophies", headers)

    def self_user_trophies(self, headers: Mapping[str, str]) -> Any:
        return self._get("/api/v1/me/trophies", headers)

    # =========================================================================
    # Mutations
    # =========================================================================

    def vote(self, fullname: str, direction: int, headers: Mapping[str, str]) -> Any:
        return self._post("/api/vote", headers, id=fullname, dir=direction)

    def save(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._post("/api/save", headers, id=fullname)

    def unsave(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._post("/api/unsave", headers, id=fullname)

    def read_message(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._post("/api/read_message", headers, id=fullname)

    def unread_message(self, fullname: str, headers: Mapping[str, str]) -> Any:
        return self._post("/api/unread_message", headers, id=fullname)
