"""
View-model assembly for the leaderboard.

`build_view` is the pure recomputation: categories, filter, sort and
paginate, in that order, from a snapshot and a view state.
`LeaderboardSession` holds the current snapshot and view state for one
renderer and reacts to its two events plus snapshot replacement.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from loguru import logger

from .categories import extract_categories
from .entities import ALL, RankedEntity, Snapshot
from .filters import filter_by_category
from .paginator import clamp_page, paginate, validate_page_size
from .ranker import rank_entities

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ViewState:
    """The user-controlled inputs of one leaderboard view."""

    selected_category: str = ALL
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        validate_page_size(self.page_size)
        clamp_page(self.current_page, 1)

    def select_category(self, category: str | None) -> ViewState:
        """
        Switch category; the page always goes back to 1.

        `None` or "" means "no selection" and maps to `ALL`; it never selects
        the uncategorized entities.
        """
        return replace(self, selected_category=category or ALL, current_page=1)

    def request_page(self, page: int) -> ViewState:
        return replace(self, current_page=page)


@dataclass(frozen=True)
class RankedRow:
    """An entity together with its absolute position in the filtered ranking."""

    rank: int
    entity: RankedEntity


@dataclass(frozen=True)
class LeaderboardView:
    """Consistent output bundle of one recomputation."""

    available_categories: tuple[str, ...]
    selected_category: str
    visible: tuple[RankedRow, ...]
    total_pages: int
    effective_page: int
    total_items: int
    page_size: int

    @property
    def visible_entities(self) -> tuple[RankedEntity, ...]:
        return tuple(row.entity for row in self.visible)

    @property
    def has_previous(self) -> bool:
        return self.effective_page > 1

    @property
    def has_next(self) -> bool:
        return self.effective_page < self.total_pages

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def is_empty(self) -> bool:
        return not self.visible


def build_view(
    source: Snapshot | Iterable[RankedEntity], state: ViewState
) -> LeaderboardView:
    """Recompute the leaderboard view for *source* under *state*."""
    if isinstance(source, Snapshot):
        entities = source.entities
    else:
        entities = Snapshot.create(source).entities
    categories = extract_categories(entities)
    filtered = filter_by_category(entities, state.selected_category)
    ordered = rank_entities(filtered)
    window = paginate(ordered, state.page_size, state.current_page)

    rows = tuple(
        RankedRow(rank=window.start_index + offset + 1, entity=entity)
        for offset, entity in enumerate(window.items)
    )
    return LeaderboardView(
        available_categories=categories,
        selected_category=state.selected_category,
        visible=rows,
        total_pages=window.total_pages,
        effective_page=window.effective_page,
        total_items=window.total_items,
        page_size=state.page_size,
    )


class LeaderboardSession:
    """
    Current snapshot and view state for one renderer.

    The renderer sends `category_selected` and `page_requested`; the data
    source calls `replace_snapshot` after a successful load. `view()` derives
    the bundle on demand and memoizes it on the inputs that determine it.
    """

    def __init__(
        self,
        snapshot: Snapshot | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if snapshot is None:
            snapshot = Snapshot.empty()
        self._snapshot = Snapshot.create(snapshot.entities, version=snapshot.version)
        self._state = ViewState(page_size=page_size)
        self._memo_key: tuple[int, str, int, int] | None = None
        self._memo_view: LeaderboardView | None = None

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def state(self) -> ViewState:
        return self._state

    def replace_snapshot(self, source: Snapshot | Iterable[RankedEntity]) -> Snapshot:
        """Swap in a freshly loaded collection as the next snapshot version."""
        entities = source.entities if isinstance(source, Snapshot) else source
        snapshot = Snapshot.create(entities, version=self._snapshot.version + 1)
        self._snapshot = snapshot
        logger.info(
            f"Snapshot replaced: {len(snapshot)} entities (version {snapshot.version})"
        )
        return snapshot

    def category_selected(self, category: str | None) -> LeaderboardView:
        self._state = self._state.select_category(category)
        logger.debug(f"Category selected: {self._state.selected_category}")
        return self.view()

    def page_requested(self, page: int) -> LeaderboardView:
        clamp_page(page, 1)
        self._state = self._state.request_page(page)
        return self.view()

    def next_page(self) -> LeaderboardView:
        current = self.view()
        return self.page_requested(min(current.effective_page + 1, max(current.total_pages, 1)))

    def previous_page(self) -> LeaderboardView:
        current = self.view()
        return self.page_requested(max(current.effective_page - 1, 1))

    def view(self) -> LeaderboardView:
        key = (
            self._snapshot.version,
            self._state.selected_category,
            self._state.current_page,
            self._state.page_size,
        )
        if key != self._memo_key or self._memo_view is None:
            self._memo_view = build_view(self._snapshot, self._state)
            self._memo_key = key
            logger.debug(
                f"Recomputed view: category={key[1]} page={key[2]} "
                f"effective={self._memo_view.effective_page}/{self._memo_view.total_pages}"
            )
        return self._memo_view
