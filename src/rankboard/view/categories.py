"""
Category extraction for leaderboard filters.
"""

from __future__ import annotations

from typing import Iterable

from .entities import ALL, RankedEntity


def extract_categories(entities: Iterable[RankedEntity]) -> tuple[str, ...]:
    """
    Return the selectable categories, `ALL` first, then first-seen order.

    First-seen order follows the source data rather than the alphabet, so a
    newly appearing category is appended instead of reshuffling the list.
    Uncategorized entities and a category spelled like the sentinel do not
    contribute a value.
    """
    seen: set[str] = set()
    ordered: list[str] = [ALL]
    for entity in entities:
        category = entity.category
        if not category or category == ALL or category in seen:
            continue
        seen.add(category)
        ordered.append(category)
    return tuple(ordered)
