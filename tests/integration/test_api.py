import pytest
from fastapi.testclient import TestClient

from app.services.enrichment import FetchError, InMemoryEnrichmentStore, RawPage, WebsiteEnricher


class StubFetcher:
    def __init__(self, html: str = "", error: Exception | None = None):
        self.html = html
        self.error = error
        self.calls = 0

    async def __call__(self, url: str) -> RawPage:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return RawPage(url=url, status_code=200, html=self.html)


@pytest.fixture
def fetcher(page_html):
    return StubFetcher(page_html)


@pytest.fixture
def client(fetcher):
    from app.api.routes import get_enricher
    from app.main import app

    enricher = WebsiteEnricher(store=InMemoryEnrichmentStore(), fetcher=fetcher)
    app.dependency_overrides[get_enricher] = lambda: enricher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_enrich_returns_profile(client, fetcher):
    resp = client.post("/api/enrich", json={"url": "acme.example"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["url"] == "https://acme.example/"
    assert set(body) == {"url", "fetchedAt", "summary", "whatTheyDo", "keywords", "signals", "sources"}
    assert body["fetchedAt"].endswith("Z")
    assert body["sources"] == [{"type": "website", "url": "https://acme.example/"}]
    assert {"type": "pricing_page", "present": True, "evidence": "Found pricing/plan links or copy"} in body["signals"]
    assert "X-Trace-Id" in resp.headers


def test_second_request_is_cached(client, fetcher):
    first = client.post("/api/enrich", json={"url": "https://acme.example/"})
    second = client.post("/api/enrich", json={"url": "https://ACME.example"})
    assert first.status_code == 200
    assert second.status_code == 200
    assert "cached" not in first.json()
    assert second.json()["cached"] is True
    assert fetcher.calls == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": b""},
        {"content": b"{not json", "headers": {"Content-Type": "application/json"}},
        {"json": {}},
        {"json": {"url": 42}},
        {"json": {"url": "   "}},
        {"json": ["https://acme.example"]},
        {"content": b"[" * 200000 + b"]" * 200000, "headers": {"Content-Type": "application/json"}},
    ],
)
def test_invalid_body_returns_400(client, fetcher, kwargs):
    resp = client.post("/api/enrich", **kwargs)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing or invalid 'url' in request body"}
    assert fetcher.calls == 0


def test_upstream_status_returns_502(client, fetcher):
    fetcher.error = FetchError("upstream", status_code=404)
    resp = client.post("/api/enrich", json={"url": "acme.example/missing"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "Failed to fetch URL (status 404)"}


def test_transport_failure_returns_502(client, fetcher):
    fetcher.error = FetchError("dns failure")
    resp = client.post("/api/enrich", json={"url": "not a url at all !!"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "Failed to fetch URL"}


def test_unexpected_failure_returns_500(client, fetcher):
    fetcher.error = RuntimeError("kaboom")
    resp = client.post("/api/enrich", json={"url": "acme.example"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal error while enriching website"}


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metrics_endpoint(client):
    client.post("/api/enrich", json={"url": "acme.example"})
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "enricher_cache_lookups_total" in resp.text


def test_analysis_failure_is_logged_once(client, monkeypatch, caplog):
    def explode(*args, **kwargs):
        raise RuntimeError("bad markup")

    monkeypatch.setattr("app.services.enrichment.enricher.strip_html", explode)
    with caplog.at_level("ERROR"):
        resp = client.post("/api/enrich", json={"url": "acme.example"})

    assert resp.status_code == 500
    assert len([record for record in caplog.records if record.exc_info]) == 1


def test_errors_outside_the_route_use_internal_error_message(fetcher):
    from app.api.routes import get_enricher
    from app.main import app

    def broken_enricher():
        raise RuntimeError("enricher unavailable")

    app.dependency_overrides[get_enricher] = broken_enricher
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            resp = test_client.post("/api/enrich", json={"url": "acme.example"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal error while enriching website"}
