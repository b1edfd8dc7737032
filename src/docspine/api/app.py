"""
FastAPI application factory.

``create_app()`` wires settings, the MongoDB connector, middleware, error
handlers, routers and the lifespan into a single ``FastAPI`` instance.

Lifecycle:
    startup   connect the connector (ping); failure aborts startup
    serving   handlers share ``connector.database`` via dependency injection
    shutdown  uvicorn stops accepting and drains in-flight requests, then
              the lifespan exit closes the connector

Manifesto:
    The app factory is the single composition root — all middleware,
    routers, and lifecycle hooks are wired here.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from docspine.api.deps import get_settings
from docspine.api.middleware.errors import docspine_error_handler, unhandled_exception_handler
from docspine.api.middleware.request_id import RequestIDMiddleware
from docspine.api.middleware.timing import TimingMiddleware
from docspine.api.routers import hello
from docspine.api.routers.entities import create_entity_router
from docspine.api.settings import DocSpineSettings
from docspine.core.errors import DocSpineError
from docspine.core.health import HealthCheck, create_health_router
from docspine.core.logging import get_logger
from docspine.db.mongo import MongoConnector
from docspine.resources import resolve_resources

log = get_logger("docspine.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — connect on startup, disconnect on shutdown."""
    connector: MongoConnector = app.state.connector
    log.info("api_starting", version=app.version, database=connector.database_name)

    await connector.connect()
    try:
        yield
    finally:
        log.info("api_stopping")
        await connector.disconnect()


def create_app(
    *,
    settings: DocSpineSettings | None = None,
    connector: MongoConnector | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : DocSpineSettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    connector : MongoConnector | None
        Override the connector (useful for testing).  When ``None`` one is
        built from ``settings``.
    """
    settings = settings or get_settings()
    resources = resolve_resources(settings.entities)
    connector = connector or MongoConnector(
        settings.mongodb_uri,
        settings.database_name,
        server_selection_timeout_ms=settings.server_selection_timeout_ms,
    )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.connector = connector
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (last added runs outermost) ────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(DocSpineError, docspine_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    app.include_router(
        create_health_router(
            settings.api_title,
            version=settings.api_version,
            checks=[HealthCheck("mongodb", connector.ping)],
        )
    )
    app.include_router(hello.router, tags=["hello"])
    for resource in resources:
        app.include_router(create_entity_router(resource))

    return app
