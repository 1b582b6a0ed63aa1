"""
Data source adapters for ranking snapshots.

A source is either an HTTP(S) endpoint returning the ranking JSON or a local
JSON file. Loading is one-shot: it either produces a full snapshot or fails,
and the caller picks the fallback.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urlparse

import httpx
from loguru import logger
from pydantic import ValidationError

from .config import resolve_source_timeout
from .models import RankingPayload
from .view import ContractViolation, RankedEntity, Snapshot

Fallback = Literal["sample", "empty", "raise"]


class SourceError(RuntimeError):
    """Raised when the dataset cannot be retrieved or decoded."""


# Demonstration accounts shown when no dataset is reachable.
SAMPLE_RECORDS: list[dict[str, Any]] = [
    {"id": 1, "username": "tanaka_misaki", "storeName": "田中美咲", "followers": 2500000, "popularity": 95, "region": "tokyo"},
    {"id": 2, "username": "sato_kenta", "storeName": "佐藤健太", "followers": 1800000, "popularity": 88, "region": "osaka"},
    {"id": 3, "username": "yamada_hanako", "storeName": "山田花子", "followers": 1500000, "popularity": 82, "region": "kyoto"},
    {"id": 4, "username": "suzuki_taro", "storeName": "鈴木太郎", "followers": 1200000, "popularity": 79, "region": "nagoya"},
    {"id": 5, "username": "takahashi_ai", "storeName": "高橋愛", "followers": 980000, "popularity": 75, "region": "fukuoka"},
    {"id": 6, "username": "ito_naoki", "storeName": "伊藤直樹", "followers": 850000, "popularity": 71, "region": "sapporo"},
    {"id": 7, "username": "watanabe_miho", "storeName": "渡辺美穂", "followers": 720000, "popularity": 68, "region": "tokyo"},
    {"id": 8, "username": "nakamura_masato", "storeName": "中村雅人", "followers": 650000, "popularity": 65, "region": "osaka"},
    {"id": 9, "username": "kobayashi_sakura", "storeName": "小林さくら", "followers": 580000, "popularity": 62, "region": "kyoto"},
    {"id": 10, "username": "kato_sho", "storeName": "加藤翔", "followers": 520000, "popularity": 58, "region": "nagoya"},
    {"id": 11, "username": "yoshida_mai", "storeName": "吉田麻衣", "followers": 480000, "popularity": 55, "region": "fukuoka"},
    {"id": 12, "username": "matsumoto_daisuke", "storeName": "松本大輔", "followers": 420000, "popularity": 52, "region": "sapporo"},
]


def parse_records(data: Any) -> list[RankedEntity]:
    """Convert decoded JSON (a list or an `{"items": [...]}` envelope) to entities."""
    try:
        payload = RankingPayload.from_data(data)
    except ValidationError as exc:
        raise ContractViolation(
            f"Malformed ranking records ({exc.error_count()} error(s)): {exc}"
        ) from exc
    return payload.to_entities()


def sample_entities() -> list[RankedEntity]:
    return parse_records(SAMPLE_RECORDS)


def is_url(source: str) -> bool:
    return urlparse(source).scheme in {"http", "https"}


def load_json_file(path: str | Path) -> list[RankedEntity]:
    """Read a ranking dataset from a local JSON file."""
    file_path = Path(path).expanduser()
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise SourceError(f"No such file: {file_path}") from None
    except json.JSONDecodeError as exc:
        raise SourceError(f"Invalid JSON in {file_path}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"Cannot read {file_path}: {exc}") from exc
    return parse_records(data)


def fetch_records(
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> list[RankedEntity]:
    """Fetch a ranking dataset with a single GET request."""
    try:
        if client is None:
            with httpx.Client(timeout=resolve_source_timeout(timeout)) as owned:
                response = owned.get(url)
        else:
            response = client.get(url)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(f"[source] HTTP error {exc.response.status_code} from {url}")
        raise SourceError(f"HTTP error {exc.response.status_code}: {url}") from exc
    except httpx.RequestError as exc:
        logger.error(f"[source] Request error for {url}: {exc}")
        raise SourceError(f"Request error: {exc}") from exc
    except ValueError as exc:
        raise SourceError(f"Response from {url} is not valid JSON") from exc
    return parse_records(data)


def load_source(
    source: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> list[RankedEntity]:
    """Load entities from a URL or a file path."""
    if is_url(source):
        return fetch_records(source, client=client, timeout=timeout)
    return load_json_file(source)


def load_snapshot(
    source: str | None,
    *,
    fallback: Fallback | Snapshot = "sample",
    client: httpx.Client | None = None,
    timeout: float | None = None,
    version: int = 0,
) -> Snapshot:
    """
    Load a full snapshot from *source*, falling back when loading fails.

    Fallbacks:
    - "sample": the built-in demonstration accounts
    - "empty": an empty snapshot
    - "raise": propagate SourceError / ContractViolation
    - a Snapshot: keep that (previous) snapshot
    """
    if source is None:
        logger.info("No ranking source configured, using sample data")
        return Snapshot.create(sample_entities(), version=version)

    try:
        entities = load_source(source, client=client, timeout=timeout)
        snapshot = Snapshot.create(entities, version=version)
    except (SourceError, ContractViolation) as exc:
        if fallback == "raise":
            raise
        if isinstance(fallback, Snapshot):
            logger.warning(f"Keeping previous snapshot, loading {source} failed: {exc}")
            return fallback
        logger.warning(f"Loading {source} failed, using {fallback} data: {exc}")
        if fallback == "empty":
            return Snapshot.empty(version=version)
        return Snapshot.create(sample_entities(), version=version)

    logger.info(f"Loaded {len(snapshot)} accounts from {source}")
    return snapshot
