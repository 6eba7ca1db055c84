"""
Subreddits Fetcher
Pages through the communities the logged-in user belongs to.
"""

from typing import Optional

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Listing
from reddit_fetcher.models import Subreddit
from reddit_fetcher.fetchers.base import DEFAULT_LIMIT, PageRequest, ResourceFetcher


class SubredditsFetcher(ResourceFetcher[Subreddit]):
    """Subreddits where the user is a subscriber, contributor or moderator."""

    def __init__(
        self,
        api,
        where: str,
        auth: HeaderSource,
        limit: int = DEFAULT_LIMIT,
    ):
        super().__init__(api, auth, limit)
        self._where = where

    @property
    def where(self) -> str:
        return self._where

    def on_fetching(self, request: PageRequest) -> Optional[Listing]:
        payload = self._api.fetch_subreddits(
            where=self._where,
            headers=self._headers(),
            **request.as_params(),
        )
        if payload is None:
            return None
        return Listing.from_json(payload)

    def __repr__(self) -> str:
        return f"SubredditsFetcher(where={self._where!r}, {self._state_repr()})"
