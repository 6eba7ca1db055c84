"""
Command-line entry point for the Reddit fetcher.

Fetches one or more pages from a listing and prints one line per item.

Usage:
    # Hot posts of r/python, two pages of 10
    python -m reddit_fetcher.main --mode=submissions --target=python --limit=10 --pages=2

    # Top posts of the week
    python -m reddit_fetcher.main --mode=submissions --target=python --sort=top --time=week

    # A user's overview (posts and comments mixed)
    python -m reddit_fetcher.main --mode=overview --target=spez
    python -m reddit_fetcher.main --mode=inbox --target=unread --all

    # Comments of a submission
    python -m reddit_fetcher.main --mode=comments --target=abc123

    # Inbox / subscribed subreddits of the token's owner
    python -m reddit_fetcher.main --mode=inbox --target=unread
    python -m reddit_fetcher.main --mode=subreddits

The access token is read from --token or from the environment variable named
in the config (REDDIT_ACCESS_TOKEN by default).
"""

import argparse
import logging
import sys
from typing import Any, List, Optional, TextIO

from reddit_fetcher.auth import StaticTokenBearer
from reddit_fetcher.client import RedditClient
from reddit_fetcher.config import get_config
from reddit_fetcher.fetchers import Fetcher
from reddit_fetcher.listing import UnknownItem
from reddit_fetcher.models import (
    Comment,
    CommentsSorting,
    ContributionSorting,
    Message,
    MoreComments,
    Submission,
    SubmissionSorting,
    Subreddit,
    TimePeriod,
)
from reddit_fetcher.utils.exceptions import RedditFetcherError
from reddit_fetcher.utils.logging_config import get_logger, set_log_level, setup_file_logging

logger = get_logger("main")

MODES = ["submissions", "comments", "overview", "inbox", "subreddits"]


def _by_value(enum_cls, value: Optional[str]):
    if value is None:
        return None
    for member in enum_cls:
        if getattr(member, "sorting_str", member.value) == value:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__} value: {value}")


def build_fetcher(
    client: RedditClient,
    mode: str,
    target: Optional[str] = None,
    sort: Optional[str] = None,
    time: Optional[str] = None,
    limit: Optional[int] = None,
) -> Fetcher:
    """
    Build the fetcher for a CLI mode.

    Args:
        client: Authenticated client
        mode: One of MODES
        target: Subreddit, username, submission id, inbox folder or subreddit relation
        sort: Sort order name (hot, new, top, ...)
        time: Time period name (hour, day, week, month, year, all)
        limit: Page size

    Returns:
        The configured fetcher
    """
    time_period = _by_value(TimePeriod, time) or TimePeriod.ALL_TIME

    if mode == "submissions":
        sorting = _by_value(SubmissionSorting, sort) or SubmissionSorting.HOT
        return client.submissions(target or "", limit=limit, sorting=sorting, time_period=time_period)

    if mode == "comments":
        if not target:
            raise ValueError("--target (submission id) is required for comments")
        sorting = _by_value(CommentsSorting, sort) or CommentsSorting.CONFIDENCE
        return client.comments(target, limit=limit, sorting=sorting)

    if mode == "overview":
        sorting = _by_value(ContributionSorting, sort) or ContributionSorting.NEW
        if target:
            return client.account.overview(target, limit=limit, sorting=sorting, time_period=time_period)
        return client.self_account.overview(limit=limit, sorting=sorting, time_period=time_period)

    if mode == "inbox":
        folder = target or "inbox"
        return client.messages.folder(folder, limit)

    if mode == "subreddits":
        return client.self_account.subscribed_subreddits(limit=limit)

    raise ValueError(f"Unknown mode: {mode}")


def format_item(item: Any) -> str:
    """One-line rendering of a listing item."""
    if isinstance(item, Submission):
        return f"[post] {item.fullname} r/{item.subreddit} ({item.score}) {item.title}"
    if isinstance(item, Comment):
        body = item.body.replace("\n", " ")
        return f"[comment] {item.fullname} u/{item.author} ({item.score}) {body[:120]}"
    if isinstance(item, MoreComments):
        return f"[more] {item.count} more comments under {item.parent_id}"
    if isinstance(item, Message):
        return f"[message] {item.fullname} from u/{item.author}: {item.subject}"
    if isinstance(item, Subreddit):
        return f"[subreddit] r/{item.display_name} ({item.subscribers} subscribers)"
    if isinstance(item, UnknownItem):
        return f"[unknown:{item.kind}] {item.reason}"
    return repr(item)


def run(
    fetcher: Fetcher,
    pages: int = 1,
    previous: bool = False,
    out: Optional[TextIO] = None,
    everything: bool = False,
) -> int:
    """
    Fetch pages and print their items.

    With ``everything`` the listing is read forward to its end and
    ``pages``/``previous`` are ignored.

    Returns:
        Number of items printed
    """
    out = out or sys.stdout
    if everything:
        items: List[Any] = fetcher.fetch_all()
        logger.info(f"Fetched {len(items)} items to the end of the listing")
        for item in items:
            print(format_item(item), file=out)
        return len(items)

    printed = 0
    for page in range(1, pages + 1):
        items = fetcher.fetch_previous() if previous else fetcher.fetch_next()
        logger.info(f"Page {page}: {len(items)} items")
        for item in items:
            print(format_item(item), file=out)
            printed += 1
        if not items:
            break
    return printed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Reddit fetcher - page through Reddit listings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m reddit_fetcher.main --mode=submissions --target=python
    python -m reddit_fetcher.main --mode=submissions --sort=top --time=week --pages=3
    python -m reddit_fetcher.main --mode=overview --target=spez
    python -m reddit_fetcher.main --mode=inbox --target=unread --all
        """
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        default="submissions",
        help="Listing to fetch (default: submissions)"
    )

    parser.add_argument(
        "--target",
        default=None,
        help="Subreddit, username, submission id or inbox folder"
    )

    parser.add_argument("--sort", default=None, help="Sort order (hot, new, top, ...)")

    parser.add_argument("--time", default=None, help="Time period for top/controversial")

    parser.add_argument("--limit", type=int, default=None, help="Page size")

    parser.add_argument("--pages", type=int, default=1, help="Number of pages to fetch")

    parser.add_argument(
        "--previous",
        action="store_true",
        help="Page backwards instead of forwards"
    )

    parser.add_argument(
        "--all",
        action="store_true",
        dest="everything",
        help="Fetch forward until the listing ends (ignores --pages/--previous)"
    )

    parser.add_argument("--token", default=None, help="OAuth access token")

    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Enable file logging to logs/reddit.log"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every request at DEBUG level"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.log_file:
        setup_file_logging()

    config = get_config()
    token = args.token or config.auth.resolve_token()
    if not token:
        logger.error(f"No access token: pass --token or set {config.auth.token_env}")
        return 2

    with RedditClient(StaticTokenBearer(token), config=config) as client:
        try:
            fetcher = build_fetcher(
                client,
                mode=args.mode,
                target=args.target,
                sort=args.sort,
                time=args.time,
                limit=args.limit,
            )
        except ValueError as e:
            logger.error(str(e))
            return 2
        except RedditFetcherError as e:
            logger.error(f"Could not set up fetcher: {e}")
            return 1

        try:
            count = run(fetcher, pages=args.pages, previous=args.previous, everything=args.everything)
        except RedditFetcherError as e:
            logger.error(f"Fetch failed: {e}")
            return 1

    logger.info(f"Done: {count} items")
    return 0


if __name__ == "__main__":
    sys.exit(main())
