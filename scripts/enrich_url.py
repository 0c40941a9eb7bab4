import argparse
import asyncio
import json
import sys

from app.core.logging import configure_logging
from app.services.enrichment import EnrichmentError, FetchError, InMemoryEnrichmentStore, WebsiteEnricher, fetch_page
from app.services.enrichment.enricher import PageFetcher


async def enrich_once(url: str, fetcher: PageFetcher = fetch_page) -> dict:
    enricher = WebsiteEnricher(store=InMemoryEnrichmentStore(), fetcher=fetcher)
    outcome = await enricher.enrich(url)
    return outcome.result.to_payload()


def main() -> None:
    parser = argparse.ArgumentParser(description="Enrich a single website and print the profile as JSON")
    parser.add_argument("url", help="Website URL, with or without scheme")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact output)")
    args = parser.parse_args()

    configure_logging()
    try:
        payload = asyncio.run(enrich_once(args.url))
    except FetchError as exc:
        status = f" (status {exc.status_code})" if exc.status_code else ""
        print(f"Failed to fetch URL{status}", file=sys.stderr)
        sys.exit(2)
    except EnrichmentError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(payload, indent=args.indent or None))


if __name__ == "__main__":
    main()
