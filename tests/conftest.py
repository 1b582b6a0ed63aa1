from __future__ import annotations

import pytest
from loguru import logger

from rankboard import log as log_module
from rankboard import server as server_module
from rankboard.sources import sample_entities
from rankboard.view import RankedEntity


def make_entity(
    entity_id: int | str,
    followers: int,
    category: str | None = None,
    **payload,
) -> RankedEntity:
    return RankedEntity(
        id=entity_id,
        display_name=f"user_{entity_id}",
        metric_value=followers,
        category=category,
        payload=payload,
    )


@pytest.fixture()
def twelve_accounts() -> list[RankedEntity]:
    """The twelve demonstration accounts, listed in shuffled source order."""
    accounts = sample_entities()
    order = [7, 0, 11, 3, 9, 1, 5, 10, 2, 8, 4, 6]
    return [accounts[i] for i in order]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "RANKBOARD_PAGE_SIZE",
        "RANKBOARD_SOURCE",
        "RANKBOARD_SOURCE_TIMEOUT",
        "RANKBOARD_LOG_LEVEL",
        "RANKBOARD_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COLUMNS", "200")
    server_module.reset_session()
    yield
    server_module.reset_session()


@pytest.fixture(autouse=True)
def detach_log_sinks():
    """CLI runs bind loguru to a temporary stderr; drop it after each test."""
    yield
    logger.remove()
    log_module._configured = False
