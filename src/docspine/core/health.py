"""Dependency probes for docspine.

The service has one hard dependency, MongoDB, but probes are declared as a
list of :class:`HealthCheck` so optional dependencies can report
``degraded`` without taking the service out of rotation.

Endpoints (see :func:`create_health_router`):

    GET /health        all checks; 503 when a required check fails
    GET /health/ready  all checks; 503 unless every check passes
    GET /health/live   process liveness only, never touches a dependency

Quick start::

    router = create_health_router(
        "docspine",
        version="0.1.0",
        checks=[HealthCheck("mongodb", connector.ping)],
    )
    app.include_router(router)
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

Status = Literal["healthy", "degraded", "unhealthy"]

_PROCESS_STARTED = time.monotonic()


def _uptime_s() -> float:
    return round(time.monotonic() - _PROCESS_STARTED, 1)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class CheckResult(BaseModel):
    status: Status
    latency_ms: float | None = None
    error: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: Status = "healthy"
    service: str = ""
    version: str = ""
    uptime_s: float = Field(default_factory=_uptime_s)
    timestamp: str = Field(default_factory=_now_iso)
    checks: dict[str, CheckResult] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    status: str = "alive"


@dataclass
class HealthCheck:
    """One named dependency probe.

    ``check_fn`` returns normally when the dependency answers and raises
    otherwise.  A failing non-required check downgrades the service to
    ``degraded`` instead of ``unhealthy``.
    """

    name: str
    check_fn: Callable[[], Awaitable[Any]]
    required: bool = True
    timeout_s: float = 5.0

    async def run(self) -> CheckResult:
        started = time.monotonic()
        try:
            await asyncio.wait_for(self.check_fn(), timeout=self.timeout_s)
        except TimeoutError:
            return CheckResult(status="unhealthy", error="timeout")
        except Exception as exc:  # noqa: BLE001
            return CheckResult(
                status="unhealthy",
                latency_ms=_elapsed_ms(started),
                error=str(exc)[:200],
            )
        return CheckResult(status="healthy", latency_ms=_elapsed_ms(started))


def _elapsed_ms(started: float) -> float:
    return round((time.monotonic() - started) * 1000, 2)


async def run_checks(checks: list[HealthCheck]) -> dict[str, CheckResult]:
    """Run every probe concurrently, keyed by check name."""
    results = await asyncio.gather(*(check.run() for check in checks))
    return {check.name: result for check, result in zip(checks, results, strict=True)}


def overall_status(results: dict[str, CheckResult], checks: list[HealthCheck]) -> Status:
    """``unhealthy`` if a required probe failed, ``degraded`` if only optional ones did."""
    failed = {name for name, result in results.items() if result.status != "healthy"}
    if not failed:
        return "healthy"
    required = {check.name for check in checks if check.required}
    return "unhealthy" if failed & required else "degraded"


def create_health_router(
    service_name: str,
    version: str,
    checks: list[HealthCheck] | None = None,
    prefix: str = "/health",
) -> APIRouter:
    """Build the ``/health`` router for ``service_name``."""
    router = APIRouter(tags=["health"])
    probes = list(checks or [])

    async def _probe(*, strict: bool) -> JSONResponse:
        results = await run_checks(probes)
        status = overall_status(results, probes)
        body = HealthResponse(status=status, service=service_name, version=version, checks=results)
        failing = status != "healthy" if strict else status == "unhealthy"
        return JSONResponse(content=body.model_dump(), status_code=503 if failing else 200)

    @router.get(prefix, response_model=HealthResponse)
    async def health() -> JSONResponse:
        return await _probe(strict=False)

    @router.get(f"{prefix}/ready", response_model=HealthResponse)
    async def readiness() -> JSONResponse:
        return await _probe(strict=True)

    @router.get(f"{prefix}/live", response_model=LivenessResponse)
    async def liveness() -> LivenessResponse:
        return LivenessResponse()

    return router
