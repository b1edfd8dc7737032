"""User schemas (collection ``users``)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from docspine.models.common import Document, GroupStats, Int32, PartialUpdate


class User(Document):
    name: str
    email: str
    age: Int32
    city: str


class CreateUser(BaseModel):
    name: str
    email: str
    age: Int32
    city: str


class UpdateUser(PartialUpdate):
    name: str | None = None
    email: str | None = None
    age: Int32 | None = None
    city: str | None = None


class CityStats(GroupStats):
    """Average age and user count for one city."""

    city: str = Field(alias="_id")
    avg_age: float
    total_users: int
