import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from app.core.config import Settings, get_settings
from app.core.observability import CACHE_LOOKUPS
from app.schemas.enrichment import EnrichmentResult, SourceRef
from app.services.enrichment.errors import EnrichmentError, InternalError, ValidationError
from app.services.enrichment.extractors import build_keywords, build_summary, build_what_they_do
from app.services.enrichment.fetcher import RawPage, fetch_page
from app.services.enrichment.signals import infer_signals
from app.services.enrichment.store import EnrichmentStore, MissGuard, NoopGuard, SingleFlightGuard
from app.services.enrichment.text import split_sentences, strip_html
from app.utils.urls import coerce_scheme, normalize_url

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], Awaitable[RawPage]]


@dataclass(frozen=True)
class EnrichmentOutcome:
    result: EnrichmentResult
    cached: bool = False


def analyze_page(page: RawPage, normalized_url: str, settings: Settings | None = None) -> EnrichmentResult:
    settings = settings or get_settings()
    text = strip_html(page.html)
    sentences = split_sentences(text)

    return EnrichmentResult(
        url=normalized_url,
        fetched_at=page.fetched_at,
        summary=build_summary(
            sentences,
            min_length=settings.summary_min_sentence_length,
            max_sentences=settings.summary_max_sentences,
        ),
        what_they_do=build_what_they_do(
            sentences,
            window=settings.what_they_do_window,
            limit=settings.what_they_do_limit,
        ),
        keywords=build_keywords(text, max_keywords=settings.keyword_limit),
        signals=infer_signals(page.html, text, fallback_count=settings.signal_fallback_count),
        sources=[SourceRef(type="website", url=normalized_url)],
    )


def guard_from_settings(settings: Settings) -> MissGuard:
    return SingleFlightGuard() if settings.enrich_single_flight else NoopGuard()


class WebsiteEnricher:
    """Fetches a website once per normalized URL and derives its profile.

    Results are kept in the injected store for the lifetime of the store;
    a hit skips the fetch and the analysis entirely.
    """

    def __init__(
        self,
        store: EnrichmentStore,
        fetcher: PageFetcher = fetch_page,
        guard: MissGuard | None = None,
        settings: Settings | None = None,
    ):
        self.store = store
        self.fetcher = fetcher
        self.settings = settings or get_settings()
        self.guard = guard or guard_from_settings(self.settings)

    async def enrich(self, url_input: Any) -> EnrichmentOutcome:
        if not isinstance(url_input, str) or not url_input.strip():
            raise ValidationError("Missing or invalid 'url' in request body")

        url = coerce_scheme(url_input)
        normalized = normalize_url(url)

        cached = self._lookup(normalized)
        if cached is not None:
            return EnrichmentOutcome(result=cached, cached=True)

        async with self.guard.hold(normalized):
            # Another caller may have filled the slot while this one waited.
            cached = self.store.get(normalized)
            if cached is not None:
                return EnrichmentOutcome(result=cached, cached=True)

            page = await self.fetcher(url)
            try:
                result = analyze_page(page, normalized, self.settings)
            except EnrichmentError:
                raise
            except Exception as exc:
                raise InternalError(f"Failed to analyze {normalized}") from exc

            self.store.put(normalized, result)
            logger.info("Enriched %s", normalized)
            return EnrichmentOutcome(result=result)

    def _lookup(self, key: str) -> EnrichmentResult | None:
        result = self.store.get(key)
        CACHE_LOOKUPS.labels("hit" if result is not None else "miss").inc()
        if result is not None:
            logger.debug("Cache hit for %s", key)
        return result
