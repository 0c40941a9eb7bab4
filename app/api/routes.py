import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as SchemaValidationError
from starlette.responses import JSONResponse

from app.core.responses import error_response, success_response
from app.schemas import EnrichRequest
from app.services.enrichment import FetchError, ValidationError, WebsiteEnricher

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Missing or invalid 'url' in request body"
INTERNAL_ERROR_MESSAGE = "Internal error while enriching website"

router = APIRouter(prefix="/api", tags=["enrichment"])


def get_enricher(request: Request) -> WebsiteEnricher:
    return request.app.state.enricher


async def _read_enrich_request(request: Request) -> EnrichRequest | None:
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        return None
    try:
        return EnrichRequest.model_validate(body)
    except SchemaValidationError:
        return None


def _fetch_error_message(exc: FetchError) -> str:
    if exc.status_code is None:
        return "Failed to fetch URL"
    return f"Failed to fetch URL (status {exc.status_code})"


@router.post("/enrich")
async def enrich_website(request: Request, enricher: WebsiteEnricher = Depends(get_enricher)):
    payload = await _read_enrich_request(request)
    if payload is None:
        body, status = error_response(INVALID_BODY_MESSAGE, 400)
        return JSONResponse(body, status_code=status)

    try:
        outcome = await enricher.enrich(payload.url)
    except ValidationError as exc:
        body, status = error_response(str(exc), 400)
    except FetchError as exc:
        body, status = error_response(_fetch_error_message(exc), 502)
    except Exception:
        logger.exception("Enrichment error")
        body, status = error_response(INTERNAL_ERROR_MESSAGE, 500)
    else:
        return JSONResponse(success_response(outcome.result.to_payload(), cached=outcome.cached))
    return JSONResponse(body, status_code=status)
