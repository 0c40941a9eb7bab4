from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from time import perf_counter

import httpx

from app.core.config import get_settings
from app.core.observability import FETCH_COUNT, FETCH_LATENCY
from app.core.time import now_utc
from app.services.enrichment.errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawPage:
    url: str
    status_code: int
    html: str
    fetched_at: datetime = field(default_factory=now_utc)


def request_headers() -> dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.enrich_user_agent,
        "Accept": settings.enrich_accept_header,
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


async def fetch_page(url: str, client: httpx.AsyncClient | None = None) -> RawPage:
    """GET ``url`` once. Non-2xx responses and transport errors raise ``FetchError``."""
    settings = get_settings()
    started = perf_counter()
    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=settings.enrich_http_timeout_seconds,
                follow_redirects=settings.fetch_follow_redirects,
            ) as owned_client:
                response = await owned_client.get(url, headers=request_headers())
        else:
            response = await client.get(url, headers=request_headers())
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        FETCH_COUNT.labels("transport_error").inc()
        logger.warning("Fetch of %s failed: %s", url, exc)
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc
    finally:
        FETCH_LATENCY.observe(perf_counter() - started)

    if not response.is_success:
        FETCH_COUNT.labels("bad_status").inc()
        logger.warning("Fetch of %s returned status %s", url, response.status_code)
        raise FetchError(f"Upstream returned status {response.status_code}", status_code=response.status_code)

    FETCH_COUNT.labels("ok").inc()
    return RawPage(url=url, status_code=response.status_code, html=response.text)
