"""
Configuration helpers for the leaderboard.
"""

from __future__ import annotations

import os

from .view import DEFAULT_PAGE_SIZE, ContractViolation


ENV_PAGE_SIZE = "RANKBOARD_PAGE_SIZE"
ENV_SOURCE = "RANKBOARD_SOURCE"
ENV_SOURCE_TIMEOUT = "RANKBOARD_SOURCE_TIMEOUT"
ENV_LOG_LEVEL = "RANKBOARD_LOG_LEVEL"
ENV_LOG_DIR = "RANKBOARD_LOG_DIR"

DEFAULT_SOURCE_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def resolve_page_size(override: int | None = None) -> int:
    """
    Resolve the page size from an explicit override, env var, or default.

    Precedence:
    1) explicit override
    2) RANKBOARD_PAGE_SIZE
    3) default (10)
    """
    if override is not None:
        raw: object = override
    else:
        raw = os.getenv(ENV_PAGE_SIZE) or DEFAULT_PAGE_SIZE
    try:
        page_size = int(raw)
    except (TypeError, ValueError):
        raise ContractViolation(f"page size must be a positive integer, got {raw!r}") from None
    if page_size <= 0:
        raise ContractViolation(f"page size must be a positive integer, got {raw!r}")
    return page_size


def resolve_source(override: str | None = None) -> str | None:
    """Return the dataset location (URL or file path), if one is configured."""
    return override or os.getenv(ENV_SOURCE) or None


def resolve_source_timeout(override: float | None = None) -> float:
    if override is not None:
        return float(override)
    return float(os.getenv(ENV_SOURCE_TIMEOUT, str(DEFAULT_SOURCE_TIMEOUT)))


def resolve_log_level(override: str | None = None) -> str:
    return (override or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def resolve_log_dir(override: str | None = None) -> str | None:
    return override or os.getenv(ENV_LOG_DIR) or None
