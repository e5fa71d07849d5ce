from __future__ import annotations

from starlette.testclient import TestClient

from bankbridge.mock_remotes import create_mock_app


def test_serves_one_record_per_source() -> None:
    client = TestClient(create_mock_app({"rbf": {"bic": "DOLORENOR2XXX", "name": "Royal Bank of Fun", "countryCode": "GB"}}))
    resp = client.get("/rbf")
    assert resp.status_code == 200
    assert resp.json()["bic"] == "DOLORENOR2XXX"


def test_unknown_source_is_not_found() -> None:
    client = TestClient(create_mock_app({}))
    assert client.get("/nowhere").status_code == 404


def test_health_counts_sources(mock_remotes_app) -> None:
    resp = TestClient(mock_remotes_app).get("/health")
    assert resp.json() == {"status": "ok", "sources": 9}
