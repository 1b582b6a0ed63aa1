"""
rankboard - follower-count leaderboard with region filters and pagination.

The core is a pure view-model engine: given a snapshot of ranked accounts,
a selected region and a page number, it derives the selectable regions, the
filtered ranking ordered by followers, and the visible page window.

Example usage:
    >>> from rankboard import LeaderboardSession, load_snapshot
    >>> session = LeaderboardSession(page_size=10)
    >>> session.replace_snapshot(load_snapshot(None))
    >>> view = session.category_selected("osaka")
    >>> [row.entity.display_name for row in view.visible]
"""

from .models import RankingPayload, RankingRecord
from .sources import (
    SAMPLE_RECORDS,
    SourceError,
    fetch_records,
    load_json_file,
    load_snapshot,
    load_source,
    parse_records,
)
from .view import (
    ALL,
    ContractViolation,
    LeaderboardSession,
    LeaderboardView,
    RankedEntity,
    RankedRow,
    Snapshot,
    ViewState,
    build_view,
    extract_categories,
    filter_by_category,
    paginate,
    rank_entities,
)

__all__ = [
    # Engine
    "ALL",
    "ContractViolation",
    "LeaderboardSession",
    "LeaderboardView",
    "RankedEntity",
    "RankedRow",
    "Snapshot",
    "ViewState",
    "build_view",
    "extract_categories",
    "filter_by_category",
    "paginate",
    "rank_entities",
    # Wire models
    "RankingPayload",
    "RankingRecord",
    # Sources
    "SAMPLE_RECORDS",
    "SourceError",
    "fetch_records",
    "load_json_file",
    "load_snapshot",
    "load_source",
    "parse_records",
]
