"""Structured error helpers for API responses."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from app.services.pagination import EMPTY_PAGINATION

INVALID_PARAMETERS = "INVALID_PARAMETERS"
RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
SEARCH_FAILED = "SEARCH_FAILED"


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = build_error_payload(code, message, details)
        self.headers = dict(headers or {})


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload, headers=exc.headers)


def invalid_parameters(issues: List[Dict[str, str]]) -> AppError:
    return AppError(400, INVALID_PARAMETERS, "Invalid search parameters", {"issues": issues})


def rate_limit_exceeded(reset_time_iso: str, headers: Mapping[str, str]) -> AppError:
    return AppError(
        429,
        RATE_LIMIT_EXCEEDED,
        "Too many requests. Please try again later.",
        {"resetTime": reset_time_iso},
        headers=headers,
    )


def search_failed_payload() -> Dict[str, Any]:
    """Generic 500 body with an empty but complete pagination block."""
    payload = build_error_payload(SEARCH_FAILED, "Unable to search advocates at this time")
    payload["data"] = []
    payload["pagination"] = dict(EMPTY_PAGINATION)
    return payload
