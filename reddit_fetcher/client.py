"""
RedditClient - entry point for authenticated access.

Composes the API transport, the bearer-token header source and the
handlers. Fetchers created here share the header source, so a token
refreshed on the bearer is seen by every one of them on their next request.
"""

from typing import Any, List, Optional

from reddit_fetcher.api import RedditApi
from reddit_fetcher.auth import AuthHeaderSupplier, TokenBearer
from reddit_fetcher.config import get_config, Config
from reddit_fetcher.fetchers import CommentsFetcher, SubmissionsFetcher
from reddit_fetcher.handlers import (
    AccountHandler,
    CommonSubredditsHandler,
    ContributionHandler,
    GeneralAccountHandler,
    GeneralContributionHandler,
    GeneralMessagesHandler,
    SelfAccountHandler,
)
from reddit_fetcher.listing import Listing, decode_thing
from reddit_fetcher.models import (
    Account,
    Comment,
    CommentsSorting,
    Contribution,
    Me,
    Redditor,
    Submission,
    SubmissionSorting,
    Subreddit,
    SubredditRule,
    TimePeriod,
    WikiPage,
)
from reddit_fetcher.utils.logging_config import get_logger

logger = get_logger("client")


def _first_child(payload: Any, expected: type) -> Optional[Any]:
    if payload is None:
        return None
    listing = Listing.from_json(payload)
    for child in listing.children:
        if isinstance(child, expected):
            return child
    return None


def _thing(payload: Any, expected: type) -> Optional[Any]:
    if payload is None:
        return None
    thing = decode_thing(payload)
    return thing if isinstance(thing, expected) else None


class RedditClient:
    """
    Authenticated Reddit client.

    Single lookups return the decoded model, or None when the API answered
    successfully but without the thing. Failed requests raise a
    RedditFetcherError.
    """

    def __init__(
        self,
        bearer: TokenBearer,
        config: Optional[Config] = None,
        api: Optional[RedditApi] = None,
    ):
        """
        Initialize the client.

        Args:
            bearer: Source of the current OAuth access token
            config: Config object
            api: Pre-built transport (tests, custom httpx transport)
        """
        self._config = config or get_config()
        self._api = api or RedditApi(config=self._config)
        self._auth = AuthHeaderSupplier(bearer)
        self._default_limit = self._config.paging.default_limit

        self._messages: Optional[GeneralMessagesHandler] = None
        self._account: Optional[GeneralAccountHandler] = None
        self._self_account: Optional[SelfAccountHandler] = None
        self._contributions: Optional[GeneralContributionHandler] = None
        self._common_subreddits: Optional[CommonSubredditsHandler] = None

    def close(self):
        """Close HTTP client."""
        self._api.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def api(self) -> RedditApi:
        return self._api

    @property
    def auth(self) -> AuthHeaderSupplier:
        return self._auth

    # =========================================================================
    # Handlers (created on first access)
    # =========================================================================

    @property
    def messages(self) -> GeneralMessagesHandler:
        if self._messages is None:
            self._messages = GeneralMessagesHandler(self._api, self._auth, self._default_limit)
        return self._messages

    @property
    def account(self) -> GeneralAccountHandler:
        if self._account is None:
            self._account = GeneralAccountHandler(self._api, self._auth, self._default_limit)
        return self._account

    @property
    def self_account(self) -> SelfAccountHandler:
        if self._self_account is None:
            self._self_account = SelfAccountHandler(self._api, self.me, self._auth, self._default_limit)
        return self._self_account

    @property
    def contributions(self) -> GeneralContributionHandler:
        if self._contributions is None:
            self._contributions = GeneralContributionHandler(self._api, self._auth, self._default_limit)
        return self._contributions

    @property
    def common_subreddits(self) -> CommonSubredditsHandler:
        if self._common_subreddits is None:
            self._common_subreddits = CommonSubredditsHandler(self._api, self._auth, self._default_limit)
        return self._common_subreddits

    def account_handler(self, account: Account) -> AccountHandler:
        return AccountHandler(self._api, account, self._auth, self._default_limit)

    def contribution_handler(self, contribution: Contribution) -> ContributionHandler:
        return ContributionHandler(self._api, contribution, self._auth)

    # =========================================================================
    # Single lookups
    # =========================================================================

    def me(self) -> Optional[Me]:
        payload = self._api.me(headers=self._auth.current_headers())
        if not isinstance(payload, dict):
            return None
        return Me.from_dict(payload)

    def user(self, username: str) -> Optional[Redditor]:
        payload = self._api.user(username, headers=self._auth.current_headers())
        return _thing(payload, Redditor)

    def subreddit(self, subreddit: str) -> Optional[Subreddit]:
        payload = self._api.subreddit(subreddit, headers=self._auth.current_headers())
        return _thing(payload, Subreddit)

    def submission(self, submission_id: str) -> Optional[Submission]:
        payload = self._api.submission(f"t3_{submission_id}", headers=self._auth.current_headers())
        return _first_child(payload, Submission)

    def comment(self, comment_id: str) -> Optional[Comment]:
        payload = self._api.comment(f"t1_{comment_id}", headers=self._auth.current_headers())
        return _first_child(payload, Comment)

    def wiki(self, subreddit: str) -> Optional[WikiPage]:
        payload = self._api.wiki(subreddit, headers=self._auth.current_headers())
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            return None
        return WikiPage.from_dict(payload["data"])

    def rules(self, subreddit: str) -> Optional[List[SubredditRule]]:
        payload = self._api.rules(subreddit, headers=self._auth.current_headers())
        if not isinstance(payload, dict):
            return None
        return [SubredditRule.from_dict(r) for r in payload.get("rules") or [] if isinstance(r, dict)]

    # =========================================================================
    # Fetcher factories
    # =========================================================================

    def submissions(
        self,
        subreddit: str,
        limit: Optional[int] = None,
        sorting: SubmissionSorting = SubmissionsFetcher.DEFAULT_SORTING,
        time_period: TimePeriod = SubmissionsFetcher.DEFAULT_TIMEPERIOD,
    ) -> SubmissionsFetcher:
        return SubmissionsFetcher(
            self._api,
            subreddit=subreddit,
            auth=self._auth,
            limit=self._default_limit if limit is None else limit,
            sorting=sorting,
            time_period=time_period,
        )

    def comments(
        self,
        submission_id: str,
        limit: Optional[int] = None,
        depth: Optional[int] = None,
        sorting: CommentsSorting = CommentsFetcher.DEFAULT_SORTING,
    ) -> CommentsFetcher:
        return CommentsFetcher(
            self._api,
            submission_id=submission_id,
            auth=self._auth,
            limit=self._default_limit if limit is None else limit,
            depth=depth,
            sorting=sorting,
        )
