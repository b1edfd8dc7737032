"""Game schemas (collection ``games``)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from docspine.models.common import Document, GroupStats, Int32, PartialUpdate


class Game(Document):
    title: str
    genre: str
    price: float
    release_year: Int32
    publisher: str


class CreateGame(BaseModel):
    title: str
    genre: str
    price: float
    release_year: Int32
    publisher: str


class UpdateGame(PartialUpdate):
    title: str | None = None
    genre: str | None = None
    price: float | None = None
    release_year: Int32 | None = None
    publisher: str | None = None


class GenreStats(GroupStats):
    """Average price and game count for one genre."""

    genre: str = Field(alias="_id")
    avg_price: float
    total_games: int
