"""Health check router."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.core.dependencies import get_primary_source, get_search_cache, get_settings
from app.core.config import Settings
from app.services.advocate_sources import PrimaryAdvocateSource
from app.services.search_cache import SearchResultCache
from app.utils.time import utc_now_iso

router = APIRouter()

NO_STORE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


@router.get("/health")
async def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
    primary: PrimaryAdvocateSource = Depends(get_primary_source),
    cache: SearchResultCache = Depends(get_search_cache),
):
    """
    Report database reachability, cache size and uptime.

    A down database only degrades the service: searches are still
    answered from the fallback dataset, so the status code stays 200.
    """
    started = time.monotonic()

    database: Dict[str, Any] = {"status": "down"}
    failure = await primary.ping()
    if failure is None:
        database = {
            "status": "up",
            "responseTime": round((time.monotonic() - started) * 1000),
        }
    else:
        # error_type only; raw driver messages can carry connection details
        database["error"] = failure.error_type

    body = {
        "status": "healthy" if database["status"] == "up" else "degraded",
        "timestamp": utc_now_iso(),
        "version": settings.APP_VERSION,
        "services": {
            "database": database,
            "cache": {"status": "up", "size": cache.size()},
            "api": {
                "status": "up",
                "uptime": round(time.monotonic() - request.app.state.started_at, 3),
            },
        },
    }

    headers = dict(NO_STORE_HEADERS)
    headers["X-Response-Time"] = f"{round((time.monotonic() - started) * 1000)}ms"
    return JSONResponse(content=body, headers=headers)


@router.head("/health")
async def health_head(primary: PrimaryAdvocateSource = Depends(get_primary_source)):
    """Bare reachability probe: 200 when the database answers, else 503."""
    failure = await primary.ping()
    return Response(status_code=200 if failure is None else 503, headers=NO_STORE_HEADERS)
