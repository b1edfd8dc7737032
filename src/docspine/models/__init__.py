"""Pydantic schemas for persisted entities, their inputs and aggregate rows.

Manifesto:
    Schemas define the wire contract.  Keeping them apart from routers
    lets the repository and the HTTP layer share one definition.

Tags:
    docspine, schemas, pydantic, contract
"""

from docspine.models.common import (
    Document,
    GroupStats,
    Int32,
    ObjectIdField,
    PartialUpdate,
    parse_object_id,
)
from docspine.models.game import CreateGame, Game, GenreStats, UpdateGame
from docspine.models.user import CityStats, CreateUser, UpdateUser, User

__all__ = [
    "Document",
    "GroupStats",
    "Int32",
    "ObjectIdField",
    "PartialUpdate",
    "parse_object_id",
    "CreateGame",
    "Game",
    "GenreStats",
    "UpdateGame",
    "CityStats",
    "CreateUser",
    "UpdateUser",
    "User",
]
