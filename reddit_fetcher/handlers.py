"""
Handler groupings exposed by RedditClient.

Handlers build fetchers (or issue one-shot requests) with the client's API
and header source. They hold no pagination state of their own.
"""

from typing import Any, Callable, List, Optional, Union

from reddit_fetcher.auth import HeaderSource
from reddit_fetcher.fetchers import (
    DEFAULT_LIMIT,
    ContributionsFetcher,
    InboxFetcher,
    SubmissionsFetcher,
    SubredditsFetcher,
)
from reddit_fetcher.models import (
    Account,
    Contribution,
    ContributionSorting,
    Me,
    Message,
    SubmissionSorting,
    TimePeriod,
    Trophy,
    Votable,
    Vote,
)
from reddit_fetcher.utils.exceptions import MissingStateError, RedditFetcherError
from reddit_fetcher.utils.logging_config import get_logger

logger = get_logger("handlers")


def _fullname(thing: Union[str, Any]) -> str:
    return thing if isinstance(thing, str) else thing.fullname


def parse_trophies(payload: Any) -> List[Trophy]:
    """Decode a ``TrophyList`` payload."""
    if not isinstance(payload, dict):
        return []
    trophies = (payload.get("data") or {}).get("trophies") or []
    return [Trophy.from_dict(t.get("data") or {}) for t in trophies if isinstance(t, dict)]


class _Handler:
    def __init__(self, api, auth: HeaderSource, default_limit: int = DEFAULT_LIMIT):
        self._api = api
        self._auth = auth
        self._default_limit = default_limit

    def _limit(self, limit: Optional[int]) -> int:
        return self._default_limit if limit is None else limit


# =============================================================================
# Messages
# =============================================================================

class GeneralMessagesHandler(_Handler):
    """Inbox folders and read state."""

    def folder(self, where: str, limit: Optional[int] = None) -> InboxFetcher:
        """Any inbox folder by its API name."""
        return InboxFetcher(self._api, where, self._auth, limit=self._limit(limit))

    def inbox(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("inbox", limit)

    def unread(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("unread", limit)

    def messages(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("messages", limit)

    def sent(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("sent", limit)

    def comments_replies(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("comments", limit)

    def self_replies(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("selfreply", limit)

    def mentions(self, limit: Optional[int] = None) -> InboxFetcher:
        return self.folder("mentions", limit)

    def mark_as_read(self, read: bool, message: Union[Message, str]) -> Any:
        """
        Mark a message read or unread.

        Args:
            read: True to mark read, False to mark unread
            message: Message or its fullname
        """
        fullname = _fullname(message)
        headers = self._auth.current_headers()
        if read:
            return self._api.read_message(fullname, headers=headers)
        return self._api.unread_message(fullname, headers=headers)


# =============================================================================
# Accounts
# =============================================================================

class GeneralAccountHandler(_Handler):
    """Contribution listings of any user, by name."""

    def _contributions(
        self,
        username: str,
        where: str,
        limit: Optional[int],
        sorting: ContributionSorting,
        time_period: TimePeriod,
    ) -> ContributionsFetcher:
        return ContributionsFetcher(
            self._api,
            username=username,
            where=where,
            auth=self._auth,
            limit=self._limit(limit),
            sorting=sorting,
            time_period=time_period,
        )

    def overview(
        self,
        username: str,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions(username, "", limit, sorting, time_period)

    def submitted(
        self,
        username: str,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions(username, "submitted", limit, sorting, time_period)

    def comments(
        self,
        username: str,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions(username, "comments", limit, sorting, time_period)

    def gilded(
        self,
        username: str,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions(username, "gilded", limit, sorting, time_period)

    def trophies(self, username: str) -> List[Trophy]:
        payload = self._api.user_trophies(username, headers=self._auth.current_headers())
        return parse_trophies(payload)


class AccountHandler:
    """GeneralAccountHandler bound to one account."""

    def __init__(self, api, account: Account, auth: HeaderSource, default_limit: int = DEFAULT_LIMIT):
        self._account = account
        self._handler = GeneralAccountHandler(api, auth, default_limit)

    @property
    def account(self) -> Account:
        return self._account

    def overview(self, limit: Optional[int] = None) -> ContributionsFetcher:
        return self._handler.overview(self._account.name, limit)

    def submitted(self, limit: Optional[int] = None) -> ContributionsFetcher:
        return self._handler.submitted(self._account.name, limit)

    def comments(self, limit: Optional[int] = None) -> ContributionsFetcher:
        return self._handler.comments(self._account.name, limit)

    def gilded(self, limit: Optional[int] = None) -> ContributionsFetcher:
        return self._handler.gilded(self._account.name, limit)

    def trophies(self) -> List[Trophy]:
        return self._handler.trophies(self._account.name)


class SelfAccountHandler(_Handler):
    """
    Listings of the logged-in user.

    The username is looked up once, on first use, and kept for the life of
    this handler. A new handler looks it up again.
    """

    def __init__(
        self,
        api,
        get_self_account: Callable[[], Optional[Me]],
        auth: HeaderSource,
        default_limit: int = DEFAULT_LIMIT,
    ):
        super().__init__(api, auth, default_limit)
        self._get_self_account = get_self_account
        self._current_user: Optional[str] = None

    @property
    def username(self) -> str:
        """
        Name of the logged-in user.

        Raises:
            MissingStateError: the account could not be resolved
        """
        if self._current_user is None:
            try:
                me = self._get_self_account()
            except RedditFetcherError as e:
                logger.error(f"Could not resolve logged-in user: {e}")
                raise MissingStateError("Could not find logged user", missing="self account") from e

            if me is None or not me.name:
                raise MissingStateError("Could not find logged user", missing="self account")

            self._current_user = me.name
            logger.debug(f"Resolved logged-in user: {self._current_user}")

        return self._current_user

    def _contributions(
        self,
        where: str,
        limit: Optional[int],
        sorting: ContributionSorting,
        time_period: TimePeriod,
    ) -> ContributionsFetcher:
        return ContributionsFetcher(
            self._api,
            username=self.username,
            where=where,
            auth=self._auth,
            limit=self._limit(limit),
            sorting=sorting,
            time_period=time_period,
        )

    def overview(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("", limit, sorting, time_period)

    def submitted(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("submitted", limit, sorting, time_period)

    def comments(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("comments", limit, sorting, time_period)

    def saved(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("saved", limit, sorting, time_period)

    def hidden(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("hidden", limit, sorting, time_period)

    def upvoted(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("upvoted", limit, sorting, time_period)

    def downvoted(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("downvoted", limit, sorting, time_period)

    def gilded(
        self,
        limit: Optional[int] = None,
        sorting: ContributionSorting = ContributionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = ContributionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> ContributionsFetcher:
        return self._contributions("gilded", limit, sorting, time_period)

    def subscribed_subreddits(self, limit: Optional[int] = None) -> SubredditsFetcher:
        return SubredditsFetcher(self._api, "subscriber", self._auth, limit=self._limit(limit))

    def trophies(self) -> List[Trophy]:
        payload = self._api.self_user_trophies(headers=self._auth.current_headers())
        return parse_trophies(payload)


# =============================================================================
# Contributions
# =============================================================================

class GeneralContributionHandler(_Handler):
    """Votes and saves on any contribution, by object or fullname."""

    def vote(self, vote: Vote, votable: Union[Votable, str]) -> Any:
        return self._api.vote(_fullname(votable), vote.dir, headers=self._auth.current_headers())

    def save(self, save: bool, contribution: Union[Contribution, str]) -> Any:
        fullname = _fullname(contribution)
        headers = self._auth.current_headers()
        if save:
            return self._api.save(fullname, headers=headers)
        return self._api.unsave(fullname, headers=headers)


class ContributionHandler:
    """GeneralContributionHandler bound to one contribution."""

    def __init__(self, api, contribution: Contribution, auth: HeaderSource):
        self._contribution = contribution
        self._handler = GeneralContributionHandler(api, auth)

    def vote(self, vote: Vote) -> Any:
        return self._handler.vote(vote, self._contribution)

    def save(self, save: bool) -> Any:
        return self._handler.save(save, self._contribution)


# =============================================================================
# Subreddits
# =============================================================================

class CommonSubredditsHandler(_Handler):
    """The well-known aggregate listings."""

    def _submissions(
        self,
        subreddit: str,
        limit: Optional[int],
        sorting: SubmissionSorting,
        time_period: TimePeriod,
    ) -> SubmissionsFetcher:
        return SubmissionsFetcher(
            self._api,
            subreddit=subreddit,
            auth=self._auth,
            limit=self._limit(limit),
            sorting=sorting,
            time_period=time_period,
        )

    def frontpage(
        self,
        limit: Optional[int] = None,
        sorting: SubmissionSorting = SubmissionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = SubmissionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> SubmissionsFetcher:
        return self._submissions("", limit, sorting, time_period)

    def all(
        self,
        limit: Optional[int] = None,
        sorting: SubmissionSorting = SubmissionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = SubmissionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> SubmissionsFetcher:
        return self._submissions("all", limit, sorting, time_period)

    def popular(
        self,
        limit: Optional[int] = None,
        sorting: SubmissionSorting = SubmissionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = SubmissionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> SubmissionsFetcher:
        return self._submissions("popular", limit, sorting, time_period)

    def friends(
        self,
        limit: Optional[int] = None,
        sorting: SubmissionSorting = SubmissionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = SubmissionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> SubmissionsFetcher:
        return self._submissions("friends", limit, sorting, time_period)
