"""
Entity model for ranked leaderboard snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping


ALL = "all"
"""Sentinel category meaning "no filter applied"."""


class ContractViolation(ValueError):
    """Raised when input breaks the data-model invariants."""


@dataclass(frozen=True)
class RankedEntity:
    """One participant in the ranking."""

    id: int | str
    display_name: str
    metric_value: int
    category: str | None = None
    payload: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Freeze the payload so a snapshot cannot be mutated through it.
        if not isinstance(self.payload, MappingProxyType):
            object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def is_categorized(self) -> bool:
        return bool(self.category)


@dataclass(frozen=True)
class Snapshot:
    """
    One immutable loaded collection of ranked entities.

    Use `Snapshot.create` to build one; it checks that ids are unique and
    metric values are non-negative.
    """

    entities: tuple[RankedEntity, ...] = ()
    version: int = 0

    @classmethod
    def create(cls, entities: Iterable[RankedEntity], *, version: int = 0) -> Snapshot:
        frozen = tuple(entities)
        validate_entities(frozen)
        return cls(entities=frozen, version=version)

    @classmethod
    def empty(cls, *, version: int = 0) -> Snapshot:
        return cls(entities=(), version=version)

    def __len__(self) -> int:
        return len(self.entities)


def validate_entities(entities: Iterable[RankedEntity]) -> None:
    """Raise ContractViolation for duplicate ids or negative metric values."""
    seen: set[int | str] = set()
    for entity in entities:
        if entity.id in seen:
            raise ContractViolation(f"Duplicate entity id in snapshot: {entity.id!r}")
        seen.add(entity.id)
        if isinstance(entity.metric_value, bool) or not isinstance(entity.metric_value, int):
            raise ContractViolation(
                f"Metric value must be an integer for id {entity.id!r}: "
                f"{entity.metric_value!r}"
            )
        if entity.metric_value < 0:
            raise ContractViolation(
                f"Negative metric value for id {entity.id!r}: {entity.metric_value}"
            )
