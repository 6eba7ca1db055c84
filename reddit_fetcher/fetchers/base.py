"""
Bidirectional cursor pager.

A Fetcher walks one listing page by page. It keeps the forward ("after") and
backward ("before") tokens, the running count the API expects alongside
them, and exhaustion flags. Subclasses only say how to call their endpoint
(``on_fetching``) and, if needed, how to turn a page into items
(``on_map_result``).

State is committed only after ``on_fetching`` returns, so a failed call
leaves tokens and count exactly as they were.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, TypeVar

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Listing, map_listing
from reddit_fetcher.models import TimePeriod
from reddit_fetcher.utils.logging_config import get_logger

if TYPE_CHECKING:
    from reddit_fetcher.api import RedditApi

logger = get_logger("fetcher")

DEFAULT_LIMIT = 25

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Parameters of a single page request, built by the pager."""
    forward: bool
    limit: int
    count: int
    after: Optional[str] = None
    before: Optional[str] = None

    def as_params(self) -> Dict[str, Any]:
        """Query params for this page; the unused cursor slot is omitted."""
        params: Dict[str, Any] = {"limit": self.limit, "count": self.count}
        if self.after is not None:
            params["after"] = self.after
        if self.before is not None:
            params["before"] = self.before
        return params


class Fetcher(ABC, Generic[T]):
    """
    Generic forward/backward pager over a cursor-based listing.

    Not safe for concurrent use: callers must serialize operations on one
    instance. Separate instances are independent.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT):
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        self._limit = limit
        self._after: Optional[str] = None
        self._before: Optional[str] = None
        self._count = 0
        # Direction of the last successful fetch, None until the first one
        self._forward: Optional[bool] = None
        self._has_next = True
        self._has_previous = True

    # =========================================================================
    # Hooks
    # =========================================================================

    @abstractmethod
    def on_fetching(self, request: PageRequest) -> Optional[Listing]:
        """
        Issue the request for one page.

        Must raise a RedditFetcherError on failure. Returning None means the
        call succeeded but carried no page.
        """

    def on_map_result(self, listing: Optional[Listing]) -> List[T]:
        """Turn a page into items. Must be pure."""
        return map_listing(listing)

    # =========================================================================
    # Traversal
    # =========================================================================

    def fetch_next(self) -> List[T]:
        """
        Fetch the next page forward.

        Returns:
            Items of the page; empty when there is nothing further

        Raises:
            RedditFetcherError: the request failed; pager state is unchanged
        """
        return self._fetch(forward=True)

    def fetch_previous(self) -> List[T]:
        """
        Fetch the previous page.

        One item beyond the limit is requested, and at most ``limit`` items
        are returned. From the head of the listing (no ``before`` token yet)
        the extra item is the trailing one. When paging before a token it is
        the leading one, farthest from the cursor; the stored ``before``
        token then moves to the first kept item's fullname so the next page
        picks up the dropped item.

        Raises:
            RedditFetcherError: the request failed; pager state is unchanged
        """
        return self._fetch(forward=False)

    def fetch_all(self, limit: Optional[int] = None) -> List[T]:
        """
        Fetch forward until the listing is exhausted.

        Args:
            limit: Stop once at least this many items were collected

        Returns:
            All collected items
        """
        all_items: List[T] = []
        while self._has_next:
            items = self.fetch_next()
            all_items.extend(items)
            if not items:
                break
            if limit and len(all_items) >= limit:
                break
        return all_items

    def _fetch(self, forward: bool) -> List[T]:
        direction = "forward" if forward else "backward"

        if forward and not self._has_next:
            logger.debug(f"{self.__class__.__name__}: no further page {direction}")
            return []
        if not forward and not self._has_previous:
            logger.debug(f"{self.__class__.__name__}: no further page {direction}")
            return []

        count = self._count if self._forward == forward else 0

        request = PageRequest(
            forward=forward,
            limit=self._limit if forward else self._limit + 1,
            count=count,
            after=self._after if forward else None,
            before=None if forward else self._before,
        )

        listing = self.on_fetching(request)
        items = self.on_map_result(listing)

        dropped_leading = False
        if not forward and len(items) > self._limit:
            if request.before is None:
                items = items[:self._limit]
            else:
                # Keep the items that end right before the cursor
                items = items[len(items) - self._limit:]
                dropped_leading = True

        self._forward = forward
        self._count = count + self._limit

        if forward:
            self._after = listing.after if listing is not None else None
            self._has_next = self._after is not None
        else:
            self._before = listing.before if listing is not None else None
            self._has_previous = self._before is not None
            if dropped_leading and self._has_previous:
                # The server's token names the dropped item; continue from the first kept one
                self._before = getattr(items[0], "fullname", None) or self._before

        logger.debug(
            f"{self.__class__.__name__}: {len(items)} items {direction}, "
            f"count={self._count}, after={self._after}, before={self._before}"
        )
        return items

    def reset(self) -> None:
        """Forget tokens, count and exhaustion. Limit and filters are kept."""
        self._after = None
        self._before = None
        self._count = 0
        self._forward = None
        self._has_next = True
        self._has_previous = True

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_limit(self) -> int:
        return self._limit

    def get_count(self) -> int:
        return self._count

    def get_after(self) -> Optional[str]:
        return self._after

    def get_before(self) -> Optional[str]:
        return self._before

    def has_next(self) -> bool:
        return self._has_next

    def has_previous(self) -> bool:
        return self._has_previous

    def _state_repr(self) -> str:
        return (
            f"limit={self._limit}, count={self._count}, "
            f"after={self._after!r}, before={self._before!r}"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._state_repr()})"


class ResourceFetcher(Fetcher[T]):
    """Fetcher bound to the API and a header source."""

    def __init__(self, api: "RedditApi", auth: HeaderSource, limit: int = DEFAULT_LIMIT):
        super().__init__(limit)
        self._api = api
        self._auth = auth

    def _headers(self) -> Dict[str, str]:
        # Read on every request so a refreshed token is used right away
        return self._auth.current_headers()


class SortedFetcher(ResourceFetcher[T]):
    """Fetcher with a sort order; changing it restarts the traversal."""

    def __init__(self, api: "RedditApi", auth: HeaderSource, sorting: Any, limit: int = DEFAULT_LIMIT):
        super().__init__(api, auth, limit)
        self._sorting = sorting

    def get_sorting(self):
        return self._sorting

    def set_sorting(self, new_sorting) -> None:
        self._sorting = new_sorting
        self.reset()
        logger.info(f"{self.__class__.__name__}: sorting set to {new_sorting.sorting_str}, traversal reset")


class TimeScopedFetcher(SortedFetcher[T]):
    """SortedFetcher whose sort order may be limited to a time window."""

    def __init__(
        self,
        api: "RedditApi",
        auth: HeaderSource,
        sorting: Any,
        time_period: TimePeriod,
        limit: int = DEFAULT_LIMIT,
    ):
        super().__init__(api, auth, sorting, limit)
        self._time_period = time_period

    def get_time_period(self) -> TimePeriod:
        return self._time_period

    def set_time_period(self, new_time_period: TimePeriod) -> None:
        self._time_period = new_time_period
        self.reset()
        logger.info(f"{self.__class__.__name__}: time period set to {new_time_period.value}, traversal reset")

    def requires_time_period(self) -> bool:
        return self._sorting.requires_time_period

    def _time_period_param(self) -> Optional[str]:
        """``t`` value to send, or None when the sort order is not time-scoped."""
        if self.requires_time_period():
            return self._time_period.value
        return None
