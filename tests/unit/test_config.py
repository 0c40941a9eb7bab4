import pytest

from app.core.config import Settings, get_settings


def test_defaults_match_heuristic_cutoffs():
    settings = get_settings()
    assert settings.summary_min_sentence_length == 40
    assert settings.summary_max_sentences == 2
    assert settings.what_they_do_window == 15
    assert settings.what_they_do_limit == 4
    assert settings.keyword_limit == 10
    assert settings.signal_fallback_count == 2
    assert settings.enrich_single_flight is False


def test_rejects_non_positive_limits():
    with pytest.raises(ValueError):
        Settings(keyword_limit=0)
    with pytest.raises(ValueError):
        Settings(enrich_http_timeout_seconds=0)


def test_single_flight_flag_selects_guard(monkeypatch):
    from app.services.enrichment import InMemoryEnrichmentStore, WebsiteEnricher
    from app.services.enrichment.store import NoopGuard, SingleFlightGuard

    assert isinstance(WebsiteEnricher(store=InMemoryEnrichmentStore()).guard, NoopGuard)

    monkeypatch.setenv("ENRICH_SINGLE_FLIGHT", "true")
    get_settings.cache_clear()
    assert isinstance(WebsiteEnricher(store=InMemoryEnrichmentStore()).guard, SingleFlightGuard)
