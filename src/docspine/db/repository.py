"""
Collection repository — the database half of every entity endpoint.

Each method performs exactly one driver call and converts
``PyMongoError`` into :class:`~docspine.core.errors.DatabaseError` so the
HTTP layer only ever sees docspine error types.  Results are validated into
the resource's pydantic schemas on the way out.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from docspine.core.errors import DatabaseError, DocumentNotFoundError
from docspine.core.logging import get_logger
from docspine.models import Document, GroupStats
from docspine.resources import Resource

log = get_logger(__name__)


class EntityRepository:
    """CRUD and aggregation over one resource's collection."""

    def __init__(self, database: AsyncIOMotorDatabase, resource: Resource):
        self.resource = resource
        self.collection = database[resource.collection]

    def _failed(self, operation: str, exc: PyMongoError) -> DatabaseError:
        log.error(
            "mongodb_operation_failed",
            collection=self.resource.collection,
            operation=operation,
            error=str(exc),
        )
        return DatabaseError(
            f"{operation} on '{self.resource.collection}' failed", cause=exc
        ).with_context(collection=self.resource.collection, operation=operation)

    async def insert(self, document: Document) -> ObjectId:
        try:
            result = await self.collection.insert_one(document.to_mongo())
        except PyMongoError as exc:
            raise self._failed("insert_one", exc) from exc
        return result.inserted_id

    async def find_all(self) -> list[Document]:
        """Every document in store-native order."""
        try:
            rows = await self.collection.find({}).to_list(length=None)
        except PyMongoError as exc:
            raise self._failed("find", exc) from exc
        return [self.resource.entity.model_validate(row) for row in rows]

    async def get(self, document_id: ObjectId) -> Document:
        """Fetch one document or raise :class:`DocumentNotFoundError`."""
        try:
            row = await self.collection.find_one({"_id": document_id})
        except PyMongoError as exc:
            raise self._failed("find_one", exc) from exc
        if row is None:
            raise DocumentNotFoundError(self.resource.collection, document_id)
        return self.resource.entity.model_validate(row)

    async def set_fields(self, document_id: ObjectId, fields: dict[str, Any]) -> None:
        """Apply ``$set`` with only the given fields.

        An empty ``fields`` is a no-op and issues no write.
        """
        if not fields:
            return
        try:
            await self.collection.update_one({"_id": document_id}, {"$set": fields})
        except PyMongoError as exc:
            raise self._failed("update_one", exc) from exc

    async def delete(self, document_id: ObjectId) -> int:
        """Delete by id and return how many documents matched."""
        try:
            result = await self.collection.delete_one({"_id": document_id})
        except PyMongoError as exc:
            raise self._failed("delete_one", exc) from exc
        return result.deleted_count

    async def group_stats(self) -> list[GroupStats]:
        """Run the resource's fixed group-by report."""
        report = self.resource.stats
        try:
            rows = await self.collection.aggregate(report.pipeline()).to_list(length=None)
        except PyMongoError as exc:
            raise self._failed("aggregate", exc) from exc
        return [report.schema.model_validate(row) for row in rows]
