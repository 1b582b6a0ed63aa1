"""
FastAPI server for the leaderboard.

Serves the raw ranking snapshot and the paginated, filtered view of it.
The snapshot is loaded once per process and replaced wholesale on reload;
view state travels with each request.
"""

import asyncio
from typing import Any

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from .config import resolve_page_size, resolve_source
from .log import setup_logging
from .models import RankingRecord
from .sources import SourceError, load_snapshot
from .view import ALL, ContractViolation, LeaderboardSession, ViewState, build_view

app = FastAPI(title="rankboard", description="Follower-count leaderboard API")

_session: LeaderboardSession | None = None
_reload_lock = asyncio.Lock()


class LeaderboardRow(BaseModel):
    """One visible row of the leaderboard."""

    rank: int
    account: dict[str, Any]


class LeaderboardResponse(BaseModel):
    """Response model for a leaderboard page."""

    categories: list[str]
    selected_category: str
    items: list[LeaderboardRow]
    total_pages: int
    effective_page: int
    total_items: int
    page_size: int
    has_previous: bool
    has_next: bool
    snapshot_version: int


async def get_session() -> LeaderboardSession:
    """
    Return the process-wide session, loading the snapshot on first use.

    The load runs in a worker thread so a slow source does not block the
    event loop.
    """
    global _session
    if _session is None:
        async with _reload_lock:
            if _session is None:
                snapshot = await asyncio.to_thread(
                    load_snapshot, resolve_source(), fallback="sample"
                )
                session = LeaderboardSession(page_size=resolve_page_size())
                session.replace_snapshot(snapshot)
                _session = session
    return _session


def reset_session(session: LeaderboardSession | None = None) -> None:
    """Drop (or replace) the process-wide session."""
    global _session
    _session = session


@app.get("/api/ranking")
async def get_ranking():
    """
    Return every account in the current snapshot, in source order.

    Records are re-emitted in one normalized shape: the region is always under
    `region` (an `area` key in the source is renamed), other fields keep
    their camelCase names.
    """
    session = await get_session()
    return [
        RankingRecord.from_entity(entity).to_wire()
        for entity in session.snapshot.entities
    ]


@app.get("/api/categories")
async def get_categories():
    """Return the selectable regions, `all` first."""
    session = await get_session()
    return {"categories": list(session.view().available_categories)}


@app.get("/api/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    category: str = ALL,
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100),
):
    """Return one page of the ranking for a region."""
    session = await get_session()
    state = ViewState(
        selected_category=category or ALL,
        current_page=page,
        page_size=page_size or session.state.page_size,
    )
    view = build_view(session.snapshot, state)
    return LeaderboardResponse(
        categories=list(view.available_categories),
        selected_category=view.selected_category,
        items=[
            LeaderboardRow(
                rank=row.rank,
                account=RankingRecord.from_entity(row.entity).to_wire(),
            )
            for row in view.visible
        ],
        total_pages=view.total_pages,
        effective_page=view.effective_page,
        total_items=view.total_items,
        page_size=view.page_size,
        has_previous=view.has_previous,
        has_next=view.has_next,
        snapshot_version=session.snapshot.version,
    )


@app.post("/api/reload")
async def reload_snapshot():
    """Reload the configured source; the previous snapshot stays on failure."""
    session = await get_session()
    async with _reload_lock:
        source = resolve_source()
        try:
            snapshot = await asyncio.to_thread(load_snapshot, source, fallback="raise")
        except SourceError as exc:
            logger.error(f"Reload failed, keeping snapshot v{session.snapshot.version}: {exc}")
            return JSONResponse({"error": str(exc)}, status_code=502)
        except ContractViolation as exc:
            logger.error(f"Reload rejected, keeping snapshot v{session.snapshot.version}: {exc}")
            return JSONResponse({"error": str(exc)}, status_code=422)

        replaced = session.replace_snapshot(snapshot)
    return {"snapshot_version": replaced.version, "total_items": len(replaced)}


def run_server(host: str = "127.0.0.1", port: int = 8000):
    """Run the FastAPI server."""
    import uvicorn

    setup_logging(app_name="api")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
