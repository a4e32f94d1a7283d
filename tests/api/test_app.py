"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from misinfo_guardian.api.app import app
from misinfo_guardian.domain.services.fact_checking_service import FactCheckingService
from misinfo_guardian.domain.services.guardian_service import GuardianService
from misinfo_guardian.infrastructure.dependencies import get_guardian_service, get_report_sink
from misinfo_guardian.infrastructure.sinks.http_sink import HttpReportSink, HttpSinkConfig
from misinfo_guardian.infrastructure.sinks.memory_sink import InMemoryReportSink

CREDIBLE = {
    "title": "City council approves new budget",
    "content": "<p>According to the city treasurer, the budget grows by 4% next year.</p>",
    "url": "https://news.example.com/budget",
    "source": "Example News",
}
SUSPICIOUS = {
    "title": "SHOCKING!! What they hide",
    "content": "Allegedly 40% of people got sick. Nobody knows more.",
    "url": "https://news.example.com/shocking",
    "source": "Example Tabloid",
}
NO_CLAIMS = {
    "title": "A quiet day",
    "content": "The weather was pleasant. Everyone enjoyed the music.",
    "url": "https://news.example.com/quiet",
    "source": "Example News",
}


@pytest.fixture
def sink() -> InMemoryReportSink:
    """Provide an in-memory sink."""
    return InMemoryReportSink()


@pytest.fixture
def test_client(config, claim_extractor, sink) -> TestClient:
    """Create a test client wired to a heuristic-only pipeline."""
    service = GuardianService(
        config=config,
        fact_checker=FactCheckingService(config),
        claim_extractor=claim_extractor,
        report_sink=sink,
    )
    app.dependency_overrides[get_guardian_service] = lambda: service
    app.dependency_overrides[get_report_sink] = lambda: sink
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(test_client: TestClient):
    """Test health check endpoint."""
    response = test_client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["remote_fact_check"] is False


def test_status(test_client: TestClient):
    """Test status endpoint."""
    response = test_client.get("/status")
    assert response.status_code == 200
    assert response.json()["report_sink"] == "memory"


def test_analyze_article(test_client: TestClient):
    """Test analysis of a credible article."""
    response = test_client.post("/analysis/article", json=CREDIBLE)
    assert response.status_code == 200

    data = response.json()
    report = data["report"]
    assert data["flagged"] is False
    assert report["article"]["content"] == "According to the city treasurer, the budget grows by 4% next year."
    assert len(report["claims"]) == 1
    assert "article" not in report["claims"][0]
    assert report["claims"][0]["article_id"] == report["article"]["id"]
    assert report["fact_check_results"][0]["verdict"] == "UNVERIFIED"
    assert 0.0 <= report["overall_score"] <= 1.0


def test_analyze_article_without_claims(test_client: TestClient):
    """Test that an article without claims returns no report."""
    response = test_client.post("/analysis/article", json=NO_CLAIMS)
    assert response.status_code == 200
    assert response.json() == {"report": None, "flagged": False}


def test_flagged_article_reaches_sink(test_client: TestClient, sink: InMemoryReportSink):
    """Test that flagged single articles are published."""
    response = test_client.post("/analysis/article", json=SUSPICIOUS)
    assert response.json()["flagged"] is True

    reports = test_client.get("/analysis/reports").json()
    assert [report["article"]["url"] for report in reports] == [SUSPICIOUS["url"]]
    assert len(sink.reports) == 1


def test_analyze_batch(test_client: TestClient):
    """Test batch analysis."""
    response = test_client.post("/analysis/batch", json={"articles": [CREDIBLE, NO_CLAIMS, SUSPICIOUS]})
    assert response.status_code == 200

    data = response.json()
    assert data["processed"] == 2
    assert data["flagged"] == 1
    assert [report["article"]["url"] for report in data["reports"]] == [CREDIBLE["url"], SUSPICIOUS["url"]]


def test_invalid_payload(test_client: TestClient):
    """Test request validation."""
    response = test_client.post("/analysis/article", json={"title": "No body"})
    assert response.status_code == 422


def test_reports_unavailable_for_http_sink(test_client: TestClient):
    """Test listing with a sink that keeps nothing locally."""
    app.dependency_overrides[get_report_sink] = lambda: HttpReportSink(HttpSinkConfig(url="http://storage.test"))
    response = test_client.get("/analysis/reports")
    assert response.status_code == 404
