"""
Entity router factory — CRUD plus the aggregation report for one resource.

Endpoints created for a :class:`~docspine.resources.Resource` mounted at
``/things``:

    POST   /things          Create; re-reads and returns the stored document
    GET    /things          List every document in store order
    GET    /things/{id}     Fetch one document
    PUT    /things/{id}     Partial update ($set of sent fields); returns re-read
    DELETE /things/{id}     Delete; 204 on success
    GET    /stats/<report>  Group-by report, largest group first

Malformed ``{id}`` values are rejected with 400 by the ``DocumentId``
dependency before the handler runs, so no database call is made.

Tags:
    docspine, api, crud, aggregation
"""

from fastapi import APIRouter, Response, status

from docspine.api.deps import Database, DocumentId
from docspine.core.errors import DocumentNotFoundError
from docspine.core.logging import get_logger
from docspine.db.repository import EntityRepository
from docspine.resources import Resource

log = get_logger(__name__)


def create_entity_router(resource: Resource) -> APIRouter:
    """Build the router serving ``resource``."""
    router = APIRouter(tags=[resource.name])

    Entity = resource.entity
    CreateInput = resource.create
    UpdateInput = resource.update
    Stats = resource.stats.schema

    @router.post(
        resource.path,
        response_model=Entity,
        response_model_exclude_none=True,
        name=f"create_{resource.name}",
    )
    async def create(payload: CreateInput, db: Database):
        repo = EntityRepository(db, resource)
        inserted_id = await repo.insert(Entity(**payload.model_dump()))
        log.info("document_created", collection=resource.collection, id=str(inserted_id))
        return await repo.get(inserted_id)

    @router.get(
        resource.path,
        response_model=list[Entity],
        response_model_exclude_none=True,
        name=f"list_{resource.name}",
    )
    async def list_all(db: Database):
        return await EntityRepository(db, resource).find_all()

    @router.get(
        f"{resource.path}/{{id}}",
        response_model=Entity,
        response_model_exclude_none=True,
        name=f"get_{resource.name}",
    )
    async def get_one(document_id: DocumentId, db: Database):
        return await EntityRepository(db, resource).get(document_id)

    @router.put(
        f"{resource.path}/{{id}}",
        response_model=Entity,
        response_model_exclude_none=True,
        name=f"update_{resource.name}",
    )
    async def update(document_id: DocumentId, payload: UpdateInput, db: Database):
        repo = EntityRepository(db, resource)
        fields = payload.set_fields()
        await repo.set_fields(document_id, fields)
        log.info(
            "document_updated",
            collection=resource.collection,
            id=str(document_id),
            fields=sorted(fields),
        )
        # A concurrent delete between the write and this read yields 404.
        return await repo.get(document_id)

    @router.delete(
        f"{resource.path}/{{id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{resource.name}",
    )
    async def delete(document_id: DocumentId, db: Database):
        deleted = await EntityRepository(db, resource).delete(document_id)
        if deleted == 0:
            raise DocumentNotFoundError(resource.collection, document_id)
        log.info("document_deleted", collection=resource.collection, id=str(document_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(
        resource.stats.path,
        response_model=list[Stats],
        name=f"{resource.name}_stats",
    )
    async def stats(db: Database):
        return await EntityRepository(db, resource).group_stats()

    return router
