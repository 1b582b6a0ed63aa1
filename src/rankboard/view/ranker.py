"""
Ranking helpers for ordering entities by their metric.
"""

from __future__ import annotations

from typing import Iterable

from .entities import RankedEntity


def rank_entities(entities: Iterable[RankedEntity]) -> tuple[RankedEntity, ...]:
    """Sort by metric value descending; equal values keep their input order."""
    indexed = list(enumerate(entities))
    ordered = sorted(
        indexed,
        key=lambda item: (
            -item[1].metric_value,
            item[0],
        ),
    )
    return tuple(entity for _, entity in ordered)
