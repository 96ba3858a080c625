"""
Advocates router - directory search endpoint.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.dependencies import get_rate_limiter, get_search_service
from app.errors import invalid_parameters, rate_limit_exceeded, search_failed_payload
from app.schemas.search import SearchParamsError, parse_search_params
from app.services.advocate_search_service import AdvocateSearchService
from app.services.rate_limiter import RateLimitDecision, RateLimiter, client_id_from_headers
from app.utils.time import epoch_to_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/advocates", tags=["advocates"])


def rate_limit_headers(decision: RateLimitDecision) -> Dict[str, str]:
    return {
        "X-RateLimit-Limit": str(decision.limit),
        "X-RateLimit-Remaining": str(decision.remaining),
        "X-RateLimit-Reset": str(int(decision.reset_time)),
    }


async def enforce_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> RateLimitDecision:
    """Admit the request or short-circuit with 429 before any query work."""
    client_id = client_id_from_headers(request.headers)
    decision = limiter.check(client_id)
    if not decision.allowed:
        logger.info("Rate limit exceeded for client %s", client_id)
        headers = rate_limit_headers(decision)
        headers["Retry-After"] = str(decision.retry_after_seconds(limiter.now()))
        raise rate_limit_exceeded(epoch_to_iso(decision.reset_time), headers)
    return decision


@router.get("/search")
@router.get("", include_in_schema=False)
async def search_advocates(
    request: Request,
    decision: RateLimitDecision = Depends(enforce_rate_limit),
    service: AdvocateSearchService = Depends(get_search_service),
):
    """
    Search the advocate directory.

    Query params: q, page, limit, city, degree, specialties,
    minExperience, maxExperience, sortBy, sortOrder.
    """
    headers = rate_limit_headers(decision)

    try:
        params = parse_search_params(request.query_params)
    except SearchParamsError as exc:
        error = invalid_parameters(exc.issues)
        error.headers.update(headers)
        raise error

    try:
        outcome = await service.search(params)
    except Exception:  # noqa: BLE001
        logger.exception("Advocate search failed")
        return JSONResponse(status_code=500, content=search_failed_payload(), headers=headers)

    headers["X-Cache"] = "HIT" if outcome.cache_hit else "MISS"
    headers["X-Data-Source"] = outcome.source
    return JSONResponse(content=outcome.payload, headers=headers)
