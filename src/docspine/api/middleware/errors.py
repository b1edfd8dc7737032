"""
Error-handling middleware — maps docspine errors to RFC 7807 responses.
"""

from __future__ import annotations

from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse

from docspine.api.schemas.common import ProblemDetail
from docspine.core.errors import DocSpineError
from docspine.core.logging import get_logger

log = get_logger(__name__)

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "INVALID_INPUT": 400,
    "NOT_FOUND": 404,
    "UNAVAILABLE": 503,
    "CONFIG": 500,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """Resolve an error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def problem_response(
    *,
    status: int,
    title: str | None = None,
    detail: str = "",
    instance: str = "",
) -> JSONResponse:
    """Build a RFC 7807 JSON error response."""
    body = ProblemDetail(
        title=title or HTTPStatus(status).phrase,
        status=status,
        detail=detail,
        instance=instance,
    )
    return JSONResponse(status_code=status, content=body.model_dump())


async def docspine_error_handler(request: Request, exc: DocSpineError) -> JSONResponse:
    """Answer a typed docspine error with its mapped status."""
    status = status_for_error_code(exc.code)
    event = log.error if status >= 500 else log.info
    event(
        "request_failed",
        method=request.method,
        path=request.url.path,
        status=status,
        **exc.to_dict(),
    )
    detail = exc.message if status < 500 or request.app.state.settings.debug else ""
    return problem_response(status=status, detail=detail, instance=request.url.path)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — returns 500 with ProblemDetail."""
    log.exception("request_crashed", method=request.method, path=request.url.path)
    return problem_response(
        status=500,
        detail=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
        instance=request.url.path,
    )
