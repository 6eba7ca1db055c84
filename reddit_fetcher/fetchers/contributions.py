"""
Contributions Fetcher
Pages through a user's overview or one of their contribution lists.
"""

from typing import Optional

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Listing
from reddit_fetcher.models import ContributionSorting, TimePeriod
from reddit_fetcher.fetchers.base import DEFAULT_LIMIT, PageRequest, TimeScopedFetcher


class ContributionsFetcher(TimeScopedFetcher):
    """
    A user's contributions.

    ``where`` selects the list: "" for the overview (submissions and
    comments interleaved), or submitted, comments, gilded, saved, hidden,
    upvoted, downvoted. Items keep their own type, so one page may hold
    both Submission and Comment objects.
    """

    DEFAULT_SORTING = ContributionSorting.NEW
    DEFAULT_TIMEPERIOD = TimePeriod.ALL_TIME

    def __init__(
        self,
        api,
        username: str,
        where: str,
        auth: HeaderSource,
        limit: int = DEFAULT_LIMIT,
        sorting: ContributionSorting = DEFAULT_SORTING,
        time_period: TimePeriod = DEFAULT_TIMEPERIOD,
    ):
        super().__init__(api, auth, sorting, time_period, limit)
        self._username = username
        self._where = where

    @property
    def username(self) -> str:
        return self._username

    @property
    def where(self) -> str:
        return self._where

    def on_fetching(self, request: PageRequest) -> Optional[Listing]:
        common = dict(
            sorting=self._sorting.sorting_str,
            time_period=self._time_period_param(),
            headers=self._headers(),
            **request.as_params(),
        )
        if self._where == "":
            payload = self._api.fetch_user_overview(username=self._username, **common)
        else:
            payload = self._api.fetch_user_info(username=self._username, where=self._where, **common)

        if payload is None:
            return None
        return Listing.from_json(payload)

    def __repr__(self) -> str:
        return (
            f"ContributionsFetcher(username={self._username!r}, where={self._where!r}, "
            f"sorting={self._sorting.sorting_str}, timePeriod={self._time_period.value}, "
            f"{self._state_repr()})"
        )
