"""API integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from design_collector.api import dependencies as deps
from design_collector.api import routes_analyze
from design_collector.app import app
from design_collector.extract.types import ExtractionResult
from design_collector.models.snapshot import DesignSnapshot
from design_collector.service.pipeline import FALLBACK_NOTE


class StubGenerator:
    def __init__(self, text: str) -> None:
        self.text = text
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("DCOL_GENERATOR_ENABLED", "false")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stub_generator() -> StubGenerator:
    stub = StubGenerator("STYLE_CATEGORY: Soft Pastel\nTYPE: Portfolio\nCOMPLEXITY: High")
    deps._GENERATOR = stub
    return stub


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": "1.0.0"}


def test_analyze_without_generator_saves_fallback_row(client: TestClient, snapshot_payload: dict) -> None:
    resp = client.post("/analyze", json=snapshot_payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["analysis"] is None
    assert body["note"] == FALLBACK_NOTE
    assert body["savedTo"] == ["collected-designs.csv"]
    assert body["recordId"] == "1"

    designs = client.get("/list").json()["designs"]
    assert len(designs) == 1
    row = designs[0]
    assert row["Source"] == "https://example.com"
    assert row["Style Category"] == "Minimalism"
    assert row["Primary Colors"] == "#1A73E8, #F1F3F4, #202124"
    assert {"design", "ui", "ux", "inspiration", "reference"} <= set(row["Keywords"].split(", "))


def test_analyze_duplicate_source_saves_nothing(client: TestClient, snapshot_payload: dict) -> None:
    client.post("/analyze", json=snapshot_payload)
    resp = client.post("/analyze", json=snapshot_payload)
    body = resp.json()
    assert body["success"] is True
    assert body["savedTo"] == []
    assert body["recordId"] is None
    assert len(client.get("/list").json()["designs"]) == 1


def test_analyze_uses_generator_output(stub_generator: StubGenerator, snapshot_payload: dict) -> None:
    with TestClient(app) as client:
        body = client.post("/analyze", json=snapshot_payload).json()
        row = client.get("/list").json()["designs"][0]

    assert body["analysis"] == stub_generator.text
    assert body["note"] is None
    assert "URL: https://example.com" in stub_generator.prompts[0]
    assert row["Style Category"] == "Soft Pastel"
    assert row["Type"] == "Portfolio"
    assert row["Complexity"] == "High"
    assert row["Performance"] == "Good"


def test_analyze_rejects_missing_url(client: TestClient, snapshot_payload: dict) -> None:
    payload = {key: value for key, value in snapshot_payload.items() if key != "url"}
    assert client.post("/analyze", json=payload).status_code == 422


def test_delete_flow(client: TestClient, snapshot_payload: dict) -> None:
    missing = client.post("/delete", json={"id": "1"}).json()
    assert missing == {"success": False, "deleted": 0, "error": "No data file"}

    client.post("/analyze", json=snapshot_payload)
    client.post("/analyze", json={**snapshot_payload, "url": "https://other.example"})

    assert client.post("/delete", json={"id": 1}).json() == {"success": True, "deleted": 1, "error": None}
    assert client.post("/delete", json={"id": "42"}).json()["deleted"] == 0
    assert [row["ID"] for row in client.get("/list").json()["designs"]] == ["2"]


def test_list_without_table(client: TestClient) -> None:
    assert client.get("/list").json() == {"success": True, "designs": []}


def test_data_counts(client: TestClient, snapshot_payload: dict, tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "colors.csv").write_text("Hex\n#000000\n#FFFFFF\n#1A73E8\n", encoding="utf-8")
    client.post("/analyze", json=snapshot_payload)

    assert client.get("/data").json() == {
        "styles": 0,
        "colors": 3,
        "typography": 0,
        "collected-designs": 1,
    }


def test_storage_failure_returns_500(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, snapshot_payload: dict
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("DCOL_DATA_DIR", str(blocker))
    monkeypatch.setenv("DCOL_GENERATOR_ENABLED", "false")

    with TestClient(app) as client:
        resp = client.post("/analyze", json=snapshot_payload)

    assert resp.status_code == 500
    assert resp.json()["success"] is False


def test_extract_reports_failure(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing(url, settings):
        return ExtractionResult(success=False, error=f"could not load {url}")

    monkeypatch.setattr(routes_analyze, "snapshot_url", failing)

    resp = client.post("/extract", json={"url": "https://down.example"})
    assert resp.status_code == 200
    assert resp.json() == {"success": False, "data": None, "error": "could not load https://down.example"}


def test_extract_returns_snapshot(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, snapshot_payload: dict
) -> None:
    snapshot = DesignSnapshot.model_validate(snapshot_payload)

    async def succeeding(url, settings):
        return ExtractionResult(success=True, snapshot=snapshot)

    monkeypatch.setattr(routes_analyze, "snapshot_url", succeeding)

    data = client.post("/extract", json={"url": "https://example.com"}).json()["data"]
    assert data["url"] == "https://example.com"
    assert data["styleCategories"] == ["Minimalism"]
    assert data["colors"][0]["hex"] == "#1A73E8"


def test_metrics_endpoint(client: TestClient, snapshot_payload: dict) -> None:
    client.post("/analyze", json=snapshot_payload)
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "dcol_submissions_total" in resp.text
    assert "dcol_stored_records" in resp.text


def test_table_with_undecodable_bytes_still_serves_json(
    client: TestClient, snapshot_payload: dict, tmp_path: Path
) -> None:
    client.post("/analyze", json=snapshot_payload)
    table_path = tmp_path / "data" / "collected-designs.csv"
    with table_path.open("ab") as fh:
        fh.write(b'"2","2026-10-19","Caf\xe9","Landing Page","https://cafe.example"\n')

    resp = client.get("/list")
    assert resp.status_code == 200
    assert [row["Style Category"] for row in resp.json()["designs"]] == ["Caf\ufffd", "Minimalism"]

    second = client.post("/analyze", json={**snapshot_payload, "url": "https://other.example"}).json()
    assert second["recordId"] == "3"
    assert client.post("/delete", json={"id": "2"}).json()["deleted"] == 1
