"""
Settings for the Reddit fetcher.

Values come from an optional config.json next to this module (or any path
given to ``load_config``); anything missing keeps the dataclass default.

    {
        "api": {"base_url": "https://oauth.reddit.com", "timeout": 30.0},
        "paging": {"default_limit": 50},
        "auth": {"token_env": "REDDIT_ACCESS_TOKEN"}
    }
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar

S = TypeVar("S")


@dataclass
class ApiConfig:
    """HTTP transport settings."""
    base_url: str = "https://oauth.reddit.com"
    timeout: float = 30.0
    connect_timeout: float = 10.0
    user_agent: str = "python:reddit_fetcher:0.1.0"


@dataclass
class PagingConfig:
    """Page size used when a fetcher is built without an explicit limit."""
    default_limit: int = 25


@dataclass
class AuthConfig:
    """Where to find the bearer token when none is passed explicitly."""
    token_env: str = "REDDIT_ACCESS_TOKEN"

    def resolve_token(self) -> Optional[str]:
        return os.environ.get(self.token_env) or None


@dataclass
class Config:
    """Root configuration object."""
    api: ApiConfig = field(default_factory=ApiConfig)
    paging: PagingConfig = field(default_factory=PagingConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)


def _section(cls: Type[S], data: Mapping[str, Any]) -> S:
    """Build a section from the keys it knows; unknown keys are ignored."""
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to config.json. If None, uses default location.

    Returns:
        Config populated from JSON, defaults where absent.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.json"

    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = json.load(f)

    return Config(
        api=_section(ApiConfig, data.get("api") or {}),
        paging=_section(PagingConfig, data.get("paging") or {}),
        auth=_section(AuthConfig, data.get("auth") or {}),
    )


_config: Optional[Config] = None


def get_config() -> Config:
    """Process-wide config, loaded on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the process-wide config; None forces a reload on next use."""
    global _config
    _config = config
