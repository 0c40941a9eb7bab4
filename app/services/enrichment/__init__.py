from app.services.enrichment.enricher import EnrichmentOutcome, WebsiteEnricher, analyze_page
from app.services.enrichment.errors import EnrichmentError, FetchError, InternalError, ValidationError
from app.services.enrichment.fetcher import RawPage, fetch_page
from app.services.enrichment.store import InMemoryEnrichmentStore

__all__ = [
    "EnrichmentError",
    "EnrichmentOutcome",
    "FetchError",
    "InMemoryEnrichmentStore",
    "InternalError",
    "RawPage",
    "ValidationError",
    "WebsiteEnricher",
    "analyze_page",
    "fetch_page",
]
