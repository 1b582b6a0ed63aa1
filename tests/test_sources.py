"""Tests for loading ranking snapshots from files and HTTP endpoints."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from rankboard.sources import (
    SAMPLE_RECORDS,
    SourceError,
    fetch_records,
    load_json_file,
    load_snapshot,
    load_source,
    parse_records,
)
from rankboard.view import ContractViolation, Snapshot

ROWS = [
    {"id": 1, "accountName": "a", "followers": 10, "area": "osaka"},
    {"id": 2, "accountName": "b", "followers": 30, "area": "tokyo"},
]


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_parse_records_rejects_malformed_rows() -> None:
    with pytest.raises(ContractViolation, match="Malformed"):
        parse_records([{"id": 1, "followers": "many"}])


def test_sample_records_form_a_valid_snapshot() -> None:
    snapshot = Snapshot.create(parse_records(SAMPLE_RECORDS))

    assert len(snapshot) == 12


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "ranking.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")

    entities = load_json_file(path)

    assert [entity.display_name for entity in entities] == ["a", "b"]


def test_load_json_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SourceError, match="No such file"):
        load_json_file(tmp_path / "missing.json")


def test_load_json_file_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SourceError, match="Invalid JSON"):
        load_json_file(path)


def test_fetch_records_reads_items_envelope() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"items": ROWS})

    entities = fetch_records("https://api.example.com/influencers", client=_client(handler))

    assert seen == ["https://api.example.com/influencers"]
    assert [entity.metric_value for entity in entities] == [10, 30]


def test_fetch_records_http_error() -> None:
    client = _client(lambda request: httpx.Response(500, json={"message": "DB error"}))

    with pytest.raises(SourceError, match="HTTP error 500"):
        fetch_records("https://api.example.com/ranking", client=client)


def test_fetch_records_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SourceError, match="Request error"):
        fetch_records("https://api.example.com/ranking", client=_client(handler))


def test_fetch_records_non_json_body() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html></html>"))

    with pytest.raises(SourceError, match="not valid JSON"):
        fetch_records("https://api.example.com/ranking", client=client)


def test_load_source_dispatches_on_url(tmp_path: Path) -> None:
    path = tmp_path / "ranking.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")
    client = _client(lambda request: httpx.Response(200, json=ROWS[:1]))

    assert len(load_source(str(path))) == 2
    assert len(load_source("http://localhost/api/ranking", client=client)) == 1


def test_load_snapshot_without_source_uses_sample() -> None:
    snapshot = load_snapshot(None)

    assert len(snapshot) == len(SAMPLE_RECORDS)


def test_load_snapshot_fallbacks(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.json")
    previous = Snapshot.create(parse_records(ROWS), version=4)

    assert len(load_snapshot(missing, fallback="sample")) == 12
    assert len(load_snapshot(missing, fallback="empty")) == 0
    assert load_snapshot(missing, fallback=previous) is previous
    with pytest.raises(SourceError):
        load_snapshot(missing, fallback="raise")


def test_load_snapshot_duplicate_ids_violate_contract(tmp_path: Path) -> None:
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps([ROWS[0], ROWS[0]]), encoding="utf-8")

    with pytest.raises(ContractViolation, match="Duplicate"):
        load_snapshot(str(path), fallback="raise")
    assert len(load_snapshot(str(path), fallback="empty")) == 0
