from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "enricher_api_requests_total",
    "Total API requests",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "enricher_api_request_latency_seconds",
    "API request latency",
    ["method", "path"],
)

CACHE_LOOKUPS = Counter(
    "enricher_cache_lookups_total",
    "Enrichment cache lookups",
    ["result"],
)

FETCH_COUNT = Counter(
    "enricher_fetch_total",
    "Outbound page fetches",
    ["outcome"],
)

FETCH_LATENCY = Histogram(
    "enricher_fetch_latency_seconds",
    "Outbound page fetch latency",
)
