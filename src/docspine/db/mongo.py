"""
MongoDB connector — one client per process, one logical database.

The connector is created by the app factory, connected in the lifespan
startup hook and closed in the shutdown hook.  Request handlers never touch
it directly; they receive ``connector.database`` through dependency
injection (:func:`docspine.api.deps.get_database`).

The motor database handle is safe for concurrent use by every in-flight
request, so no locking happens here.
"""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from docspine.core.errors import DatabaseConnectionError
from docspine.core.logging import get_logger

log = get_logger(__name__)


class MongoConnector:
    """Owns the motor client and the handle to the configured database."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        *,
        server_selection_timeout_ms: int = 5000,
        client: Any | None = None,
    ):
        self._uri = uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client = client
        self._database: AsyncIOMotorDatabase | None = None

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def connected(self) -> bool:
        return self._database is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise DatabaseConnectionError("MongoDB connector is not connected")
        return self._database

    async def connect(self) -> AsyncIOMotorDatabase:
        """Open the client, verify the server answers, resolve the database.

        The client is created here rather than in ``__init__`` so that it
        binds to the running event loop.
        """
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
            )

        try:
            await self.ping()
        except PyMongoError as exc:
            self._client.close()
            self._client = None
            raise DatabaseConnectionError(
                "Failed to connect to MongoDB", cause=exc
            ).with_context(database=self._database_name) from exc

        self._database = self._client[self._database_name]
        log.info("mongodb_connected", database=self._database_name)
        return self._database

    async def ping(self) -> bool:
        """Round-trip a ``ping`` admin command. Raises on failure."""
        if self._client is None:
            raise DatabaseConnectionError("MongoDB connector is not connected")
        await self._client.admin.command("ping")
        return True

    async def disconnect(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database = None
        log.info("mongodb_disconnected", database=self._database_name)
