"""
Comments Fetcher
Pages through the top level of a submission's comment tree.
"""

from typing import Any, Optional, Union

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.listing import Listing
from reddit_fetcher.models import Comment, CommentsSorting, MoreComments
from reddit_fetcher.utils.exceptions import ListingDecodeError
from reddit_fetcher.fetchers.base import DEFAULT_LIMIT, PageRequest, SortedFetcher


class CommentsFetcher(SortedFetcher[Union[Comment, MoreComments]]):
    """
    Comments of one submission.

    The endpoint answers with two listings, the submission itself and then
    its comments; only the second one is paged. Collapsed branches come
    back as MoreComments items.
    """

    DEFAULT_SORTING = CommentsSorting.CONFIDENCE

    def __init__(
        self,
        api,
        submission_id: str,
        auth: HeaderSource,
        limit: int = DEFAULT_LIMIT,
        depth: Optional[int] = None,
        sorting: CommentsSorting = DEFAULT_SORTING,
    ):
        super().__init__(api, auth, sorting, limit)
        self._submission_id = submission_id
        self._depth = depth

    @property
    def submission_id(self) -> str:
        return self._submission_id

    def get_depth(self) -> Optional[int]:
        return self._depth

    def set_depth(self, new_depth: Optional[int]) -> None:
        self._depth = new_depth
        self.reset()

    def on_fetching(self, request: PageRequest) -> Optional[Listing]:
        payload = self._api.fetch_comments(
            submission_id=self._submission_id,
            sorting=self._sorting.sorting_str,
            depth=self._depth,
            headers=self._headers(),
            **request.as_params(),
        )
        if payload is None:
            return None
        return Listing.from_json(_comments_listing(payload))

    def __repr__(self) -> str:
        return (
            f"CommentsFetcher(submissionId={self._submission_id!r}, "
            f"sorting={self._sorting.sorting_str}, depth={self._depth}, "
            f"{self._state_repr()})"
        )


def _comments_listing(payload: Any) -> Any:
    if not isinstance(payload, list) or len(payload) < 2:
        raise ListingDecodeError(
            "Expected [submission, comments] listing pair",
            payload_type=type(payload).__name__,
        )
    return payload[1]
