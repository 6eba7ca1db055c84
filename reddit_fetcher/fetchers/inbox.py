"""
Inbox Fetcher
Pages through one of the logged-in user's message folders.
"""

from typing import Optional

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Kind, Listing
from reddit_fetcher.models import Message
from reddit_fetcher.fetchers.base import DEFAULT_LIMIT, PageRequest, ResourceFetcher

# Comment replies and mentions are delivered as t1 things inside the inbox
_INBOX_DECODERS = {
    Kind.COMMENT: Message.from_dict,
    Kind.MESSAGE: Message.from_dict,
}


class InboxFetcher(ResourceFetcher[Message]):
    """
    Messages of one folder: inbox, unread, messages, sent, comments,
    selfreply or mentions.
    """

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
        payload = self._api.fetch_inbox(
            where=self._where,
            headers=self._headers(),
            **request.as_params(),
        )
        if payload is None:
            return None
        return Listing.from_json(payload, decoders=_INBOX_DECODERS)

    def __repr__(self) -> str:
        return f"InboxFetcher(where={self._where!r}, {self._state_repr()})"
