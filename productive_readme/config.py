#!/usr/bin/env python3
"""
Configuration loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigError

DEFAULT_TIME_ZONE = "UTC"
DEFAULT_PATH = "README.md"
DEFAULT_COMMIT_MESSAGE = "(Automated) Update README.md"
DEFAULT_BAR_WIDTH = 21
DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True)
class Config:
    """Settings for one run."""
    github_token: str
    target_owner: str
    target_repo: str
    target_path: str = DEFAULT_PATH
    time_zone: str = DEFAULT_TIME_ZONE
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    bar_width: int = DEFAULT_BAR_WIDTH
    max_workers: int = DEFAULT_MAX_WORKERS

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)


def _first(env: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_configuration(env: Optional[Mapping[str, str]] = None) -> Config:
    """Load configuration from environment variables."""
    if env is None:
        env = os.environ

    github_token = _first(env, "GH_TOKEN", "GITHUB_TOKEN")
    if not github_token:
        raise ConfigError("GH_TOKEN environment variable not set.")

    target_owner = _first(env, "README_OWNER", "OWNER_REPO")
    if not target_owner:
        raise ConfigError("README_OWNER environment variable not set.")

    time_zone = env.get("TIMEZONE") or DEFAULT_TIME_ZONE
    try:
        ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigError(f"Unknown time zone: {time_zone}")

    return Config(
        github_token=github_token,
        target_owner=target_owner,
        target_repo=env.get("README_REPO") or target_owner,
        target_path=env.get("README_PATH") or DEFAULT_PATH,
        time_zone=time_zone,
        commit_message=env.get("COMMIT_MESSAGE") or DEFAULT_COMMIT_MESSAGE,
        bar_width=_positive_int(env, "BAR_WIDTH", DEFAULT_BAR_WIDTH),
        max_workers=_positive_int(env, "MAX_WORKERS", DEFAULT_MAX_WORKERS),
    )
