"""
FastAPI dependency injection — shared singletons and per-request factories.

Usage in routers::

    from docspine.api.deps import Database, DocumentId

    @router.get("/things/{id}")
    async def get_thing(db: Database, document_id: DocumentId):
        ...

Manifesto:
    Dependency injection keeps routers thin.  The settings and the MongoDB
    connector are created once per app; handlers only ever receive the
    database handle, never a module-level client.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from bson import ObjectId
from fastapi import Depends, Path, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from docspine.api.settings import DocSpineSettings, load_settings
from docspine.db.mongo import MongoConnector
from docspine.models import parse_object_id

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> DocSpineSettings:
    """Cached settings — loaded once per process."""
    return load_settings()


# ── Database handle (shared, resolved per request) ───────────────────────


def get_connector(request: Request) -> MongoConnector:
    return request.app.state.connector


def get_database(
    connector: Annotated[MongoConnector, Depends(get_connector)],
) -> AsyncIOMotorDatabase:
    """The shared database handle; raises 503 if the connector is down."""
    return connector.database


# ── Path parameters ──────────────────────────────────────────────────────


def get_document_id(
    id: str = Path(..., description="24-character hex document identifier"),  # noqa: A002
) -> ObjectId:
    """Parse the ``{id}`` path segment; malformed ids fail with 400 before any I/O."""
    return parse_object_id(id)


# ── Convenience type aliases ─────────────────────────────────────────────

Database = Annotated[AsyncIOMotorDatabase, Depends(get_database)]
DocumentId = Annotated[ObjectId, Depends(get_document_id)]
