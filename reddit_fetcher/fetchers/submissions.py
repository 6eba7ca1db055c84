"""
Submissions Fetcher
Pages through a subreddit's (or the front page's) posts.
"""

from typing import Optional

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Listing
from reddit_fetcher.models import Submission, SubmissionSorting, TimePeriod
from reddit_fetcher.fetchers.base import DEFAULT_LIMIT, PageRequest, TimeScopedFetcher


class SubmissionsFetcher(TimeScopedFetcher[Submission]):
    """
    Posts of one subreddit. An empty subreddit name means the front page;
    ``all``, ``popular`` and ``friends`` are regular names to the API.
    """

    DEFAULT_SORTING = SubmissionSorting.HOT
    DEFAULT_TIMEPERIOD = TimePeriod.ALL_TIME

    def __init__(
        self,
        api,
        subreddit: str,
        auth: HeaderSource,
        limit: int = DEFAULT_LIMIT,
        sorting: SubmissionSorting = DEFAULT_SORTING,
        time_period: TimePeriod = DEFAULT_TIMEPERIOD,
    ):
        super().__init__(api, auth, sorting, time_period, limit)
        self._subreddit = subreddit

    @property
    def subreddit(self) -> str:
        return self._subreddit

    def on_fetching(self, request: PageRequest) -> Optional[Listing]:
        payload = self._api.fetch_submissions(
            subreddit=self._subreddit,
            sorting=self._sorting.sorting_str,
            time_period=self._time_period_param(),
            headers=self._headers(),
            **request.as_params(),
        )
        if payload is None:
            return None
        return Listing.from_json(payload)

    def __repr__(self) -> str:
        return (
            f"SubmissionsFetcher(subreddit={self._subreddit!r}, "
            f"sorting={self._sorting.sorting_str}, timePeriod={self._time_period.value}, "
            f"{self._state_repr()})"
        )
