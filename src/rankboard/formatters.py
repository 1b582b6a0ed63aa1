"""
Display helpers shared by the terminal renderer and the API.
"""

from __future__ import annotations

from .view import ALL

PODIUM_STYLES: dict[int, str] = {
    1: "bold yellow",
    2: "bold white",
    3: "bold dark_orange3",
}
DEFAULT_RANK_STYLE = "dim"


def format_metric(count: int) -> str:
    """Compact follower count: 2500000 -> 2.5M, 980000 -> 980.0K."""
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(count)


def rank_style(rank: int) -> str:
    """Rich style for a rank badge; the podium gets gold, silver and bronze."""
    return PODIUM_STYLES.get(rank, DEFAULT_RANK_STYLE)


def category_label(category: str | None, all_label: str = "All regions") -> str:
    if category is None or category == ALL:
        return all_label
    return category
