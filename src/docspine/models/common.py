"""
Shared schema building blocks: the ObjectId field and the document base.

``ObjectIdField`` lets pydantic models carry a ``bson.ObjectId``: values read
from MongoDB stay native ObjectIds in Python-mode dumps (so they can be sent
back to the driver) and render as 24-char hex strings in JSON.
"""

from __future__ import annotations

from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from docspine.core.errors import InvalidIdentifierError

# Integer fields are stored as BSON int32.
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


def parse_object_id(value: str) -> ObjectId:
    """Strictly parse a 24-char hex string into an ObjectId.

    Raises:
        InvalidIdentifierError: if ``value`` is not a well-formed identifier.
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(str(value))
    return ObjectId(value)


class ObjectIdField(ObjectId):
    """Pydantic-aware ``bson.ObjectId``."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def _validate(value: Any) -> ObjectId:
            if isinstance(value, ObjectId):
                return value
            if isinstance(value, str) and ObjectId.is_valid(value):
                return ObjectId(value)
            raise ValueError(f"Invalid ObjectId: {value!r}")

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "objectid", "pattern": "^[0-9a-f]{24}$"}


class Document(BaseModel):
    """Base for persisted records.

    The identifier lives under ``_id`` on the wire and in the store and is
    omitted from output while unset.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdField | None = Field(default=None, alias="_id")

    def to_mongo(self) -> dict[str, Any]:
        """Document body for ``insert_one``; leaves ``_id`` to the store when unset."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PartialUpdate(BaseModel):
    """Base for partial-update inputs whose fields are all optional."""

    def set_fields(self) -> dict[str, Any]:
        """Fields the client actually sent with a non-null value.

        Presence is decided by ``model_fields_set``, so ``0``, ``0.0``, ``""``
        and ``False`` are kept; explicit ``null`` counts as absent.
        """
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class GroupStats(BaseModel):
    """Base for aggregation rows keyed by the ``$group`` ``_id``."""

    model_config = ConfigDict(populate_by_name=True)
