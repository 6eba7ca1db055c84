"""
Shared pytest fixtures for Reddit fetcher tests.

Provides listing payloads shaped like real API responses, test
configurations, and a mocked API transport.
"""

import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

from reddit_fetcher.config import Config, ApiConfig, PagingConfig, AuthConfig, set_config
from reddit_fetcher.api import RedditApi


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with fast timeouts."""
    return Config(
        api=ApiConfig(
            base_url="https://oauth.reddit.test",
            timeout=5.0,
            connect_timeout=2.0,
            user_agent="python:reddit_fetcher-tests:0.0.1",
        ),
        paging=PagingConfig(default_limit=25),
        auth=AuthConfig(token_env="REDDIT_TEST_TOKEN"),
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep the config singleton from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# Auth Fixtures
# =============================================================================

class FakeHeaderSource:
    """Header source that records how often it was asked."""

    def __init__(self, token: str = "token-1"):
        self.token = token
        self.calls = 0

    def current_headers(self) -> Dict[str, str]:
        self.calls += 1
        return {"Authorization": f"bearer {self.token}"}


@pytest.fixture
def header_source() -> FakeHeaderSource:
    return FakeHeaderSource()


# =============================================================================
# Payload Builders
# =============================================================================

def make_submission(n: int, subreddit: str = "python") -> Dict[str, Any]:
    return {
        "kind": "t3",
        "data": {
            "id": f"s{n}",
            "name": f"t3_s{n}",
            "title": f"Post {n}",
            "author": f"author{n}",
            "subreddit": subreddit,
            "score": 100 + n,
            "num_comments": n,
            "url": f"https://example.com/{n}",
            "permalink": f"/r/{subreddit}/comments/s{n}/",
            "selftext": "",
            "is_self": False,
            "created_utc": 1700000000.0 + n,
            "likes": None,
            "saved": False,
        },
    }


def make_comment(n: int, link_id: str = "t3_s1") -> Dict[str, Any]:
    return {
        "kind": "t1",
        "data": {
            "id": f"c{n}",
            "name": f"t1_c{n}",
            "author": f"commenter{n}",
            "body": f"Comment body {n}",
            "subreddit": "python",
            "link_id": link_id,
            "parent_id": link_id,
            "score": n,
            "depth": 0,
            "created_utc": 1700000100.0 + n,
            "likes": True,
            "replies": "",
        },
    }


def make_listing(
    children: List[Dict[str, Any]],
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "kind": "Listing",
        "data": {
            "children": children,
            "after": after,
            "before": before,
            "dist": len(children),
        },
    }


def submissions_page(start: int, size: int, after: Optional[str] = None, before: Optional[str] = None):
    return make_listing([make_submission(i) for i in range(start, start + size)], after=after, before=before)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_submissions_listing() -> Dict[str, Any]:
    """A page of three submissions with a forward token."""
    return submissions_page(1, 3, after="t3_s3")


@pytest.fixture
def sample_overview_listing() -> Dict[str, Any]:
    """A user overview page mixing a link and a comment."""
    return make_listing([make_submission(1), make_comment(2)], after="t1_c2")


@pytest.fixture
def sample_comments_payload() -> List[Dict[str, Any]]:
    """The [submission, comments] pair returned by /comments/{id}."""
    more = {
        "kind": "more",
        "data": {
            "id": "m1",
            "name": "t1_m1",
            "parent_id": "t3_s1",
            "count": 12,
            "depth": 0,
            "children": ["c9", "c10"],
        },
    }
    nested = make_comment(3)
    nested["data"]["replies"] = make_listing([make_comment(4)])
    return [
        make_listing([make_submission(1)]),
        make_listing([make_comment(1), nested, more], after="t1_c3"),
    ]


@pytest.fixture
def sample_inbox_listing() -> Dict[str, Any]:
    """Inbox page: a private message followed by a comment reply."""
    return make_listing([
        {
            "kind": "t4",
            "data": {
                "id": "pm1",
                "name": "t4_pm1",
                "author": "friend",
                "dest": "me",
                "subject": "hello",
                "body": "hi there",
                "new": True,
                "was_comment": False,
                "context": "",
                "created_utc": 1700000200.0,
            },
        },
        {
            "kind": "t1",
            "data": {
                "id": "cr1",
                "name": "t1_cr1",
                "author": "replier",
                "dest": "me",
                "subject": "comment reply",
                "body": "nice post",
                "new": False,
                "was_comment": True,
                "context": "/r/python/comments/s1/_/cr1/?context=3",
                "created_utc": 1700000300.0,
            },
        },
    ])


@pytest.fixture
def sample_subreddits_listing() -> Dict[str, Any]:
    return make_listing([
        {
            "kind": "t5",
            "data": {
                "id": "2qh0y",
                "name": "t5_2qh0y",
                "display_name": "python",
                "title": "Python",
                "public_description": "News about the programming language Python.",
                "subscribers": 1200000,
                "over18": False,
                "url": "/r/python/",
            },
        },
    ], after="t5_2qh0y")


@pytest.fixture
def sample_me() -> Dict[str, Any]:
    return {
        "id": "abc12",
        "name": "test_user",
        "link_karma": 10,
        "comment_karma": 20,
        "created_utc": 1600000000.0,
        "inbox_count": 2,
        "has_mail": True,
    }


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def mock_api() -> MagicMock:
    """RedditApi double; configure return values per test."""
    return MagicMock(spec=RedditApi)


def make_response(json_data: Any = None, status_code: int = 200, text: str = "") -> MagicMock:
    """httpx.Response double for RedditApi.client tests."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.content = b"" if json_data is None else b"{}"
    response.json.return_value = json_data
    response.raise_for_status.return_value = None
    return response


# =============================================================================
# Builder Fixtures
# =============================================================================

@pytest.fixture
def listing_factory():
    """make_listing, for tests that build their own pages."""
    return make_listing


@pytest.fixture
def page_factory():
    """submissions_page(start, size, after=None, before=None)."""
    return submissions_page


@pytest.fixture
def response_factory():
    """make_response(json_data=None, status_code=200, text="")."""
    return make_response
