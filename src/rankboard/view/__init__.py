"""Ranked-list view-model engine."""

from .assembler import (
    DEFAULT_PAGE_SIZE,
    LeaderboardSession,
    LeaderboardView,
    RankedRow,
    ViewState,
    build_view,
)
from .categories import extract_categories
from .entities import ALL, ContractViolation, RankedEntity, Snapshot, validate_entities
from .filters import filter_by_category, is_all
from .paginator import PageWindow, clamp_page, count_pages, paginate
from .ranker import rank_entities

__all__ = [
    "ALL",
    "ContractViolation",
    "RankedEntity",
    "Snapshot",
    "validate_entities",
    "extract_categories",
    "filter_by_category",
    "is_all",
    "rank_entities",
    "PageWindow",
    "clamp_page",
    "count_pages",
    "paginate",
    "DEFAULT_PAGE_SIZE",
    "LeaderboardSession",
    "LeaderboardView",
    "RankedRow",
    "ViewState",
    "build_view",
]
