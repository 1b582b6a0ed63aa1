"""
Category filter for ranked entities.
"""

from __future__ import annotations

from typing import Iterable

from .entities import ALL, RankedEntity


def is_all(selected: str | None) -> bool:
    """Return True when *selected* means "no filter"; `None` is "no selection"."""
    return selected is None or selected == ALL


def filter_by_category(
    entities: Iterable[RankedEntity], selected: str | None
) -> tuple[RankedEntity, ...]:
    """Keep entities whose category equals *selected*, preserving order."""
    if is_all(selected):
        return tuple(entities)
    return tuple(entity for entity in entities if entity.category == selected)
