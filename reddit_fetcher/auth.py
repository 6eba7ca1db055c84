"""
Bearer-token header supply.

Token acquisition and refresh live outside this package; all it needs is an
object that can hand out the current raw access token. Headers are built
fresh on every request so a refreshed token is picked up immediately.
"""

from typing import Dict, Protocol


class TokenBearer(Protocol):
    """Anything that can return the current raw OAuth access token."""

    def get_raw_access_token(self) -> str: ...


class StaticTokenBearer:
    """TokenBearer for an already-issued token (scripts, tests)."""

    def __init__(self, token: str):
        self._token = token

    def get_raw_access_token(self) -> str:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def __repr__(self) -> str:
        return "StaticTokenBearer(token=***)"


class HeaderSource(Protocol):
    """What fetchers and handlers consume: fresh headers per request."""

    def current_headers(self) -> Dict[str, str]: ...


class AuthHeaderSupplier:
    """
    Builds the authorization header map for one request.

    Only reads from the bearer, so it is safe to share between fetchers
    and to call from several threads.
    """

    def __init__(self, bearer: TokenBearer):
        self._bearer = bearer

    def current_headers(self) -> Dict[str, str]:
        return {"Authorization": f"bearer {self._bearer.get_raw_access_token()}"}
