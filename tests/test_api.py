import random

import httpx
import pytest
from fastapi.testclient import TestClient

from brubble.analysis.aggregator import ResultAggregator
from brubble.analysis.service import AnalysisService
from brubble.dependencies import build_analysis_service, get_analysis_service
from brubble.main import app
from brubble.sources.mock import MockResultGenerator


class EmptyAdapter:
    name = "empty"

    async def fetch(self, query, persona):
        return []


class BrokenService:
    async def analyze(self, query, personas):
        raise RuntimeError("unexpected")


def _payload(*personas, query="climate policy"):
    return {"query": query, "personas": [p.model_dump(mode="json") for p in personas]}


@pytest.fixture
def client():
    app.dependency_overrides[get_analysis_service] = lambda: AnalysisService(
        ResultAggregator([EmptyAdapter()], MockResultGenerator(random.Random(9)))
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_two_political_personas_fall_back_to_mock(client, progressive, conservative):
    response = client.post("/api/v1/search", json=_payload(progressive, conservative))

    assert response.status_code == 200
    body = response.json()
    assert body["query"] == "climate policy"
    assert len(body["metrics"]) == 1
    for persona_results in body["results"]:
        assert persona_results["used_mock_fallback"] is True
        assert 8 <= persona_results["summary_stats"]["total_results"] <= 12
        assert all(r["is_mock"] for r in persona_results["results"])
    assert any("Progressive vs Conservative" in insight for insight in body["insights"])
    assert body["visualization_data"]["venn_diagram"]["kind"] == "overlap_graph"


def test_query_is_echoed_as_sent(client, progressive, conservative):
    payload = _payload(progressive, conservative, query="  climate policy ")
    response = client.post("/api/v1/search", json=payload)

    assert response.status_code == 200
    assert response.json()["query"] == "  climate policy "


def test_three_personas_pair_consecutively(client, progressive, conservative, gen_z):
    response = client.post("/api/v1/search", json=_payload(progressive, conservative, gen_z))

    assert response.status_code == 200
    pairs = [(m["persona_a"], m["persona_b"]) for m in response.json()["metrics"]]
    assert pairs == [("progressive", "conservative"), ("conservative", "gen_z")]


def test_timestamps_serialize_as_iso_strings(client, progressive, conservative):
    body = client.post("/api/v1/search", json=_payload(progressive, conservative)).json()
    assert "T" in body["timestamp"]
    assert "T" in body["results"][0]["results"][0]["timestamp"]


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_is_rejected(client, progressive, conservative, query):
    response = client.post("/api/v1/search", json=_payload(progressive, conservative, query=query))
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_single_persona_is_rejected(client, progressive):
    response = client.post("/api/v1/search", json=_payload(progressive))
    assert response.status_code == 400
    assert response.json()["message"] == "Query and at least 2 personas are required"


def test_internal_failure_returns_generic_error(progressive, conservative):
    app.dependency_overrides[get_analysis_service] = lambda: BrokenService()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/api/v1/search", json=_payload(progressive, conservative))
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "INTERNAL_ERROR", "message": "Internal server error"}


def test_every_provider_down_still_answers(settings, progressive, conservative):
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(502)))
    app.dependency_overrides[get_analysis_service] = lambda: build_analysis_service(settings, http)
    try:
        response = TestClient(app).post(
            "/api/v1/search", json=_payload(progressive, conservative)
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    for persona_results in response.json()["results"]:
        assert 8 <= persona_results["summary_stats"]["total_results"] <= 12


def test_persona_catalogue(client):
    personas = client.get("/api/v1/personas").json()
    assert [p["id"] for p in personas] == [
        "progressive",
        "conservative",
        "centrist",
        "gen_z",
        "millennial",
        "gen_x_plus",
        "urban_us",
        "rural_us",
        "european",
    ]


def test_platform_catalogue(client):
    platforms = {p["id"]: p for p in client.get("/api/v1/personas/platforms").json()}
    assert set(platforms) == {"google", "youtube", "reddit", "news", "twitter"}
    assert platforms["news"]["enabled"] is True
