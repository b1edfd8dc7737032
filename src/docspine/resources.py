"""
Resource descriptors — one per entity collection.

A :class:`Resource` names everything the generic router and repository need
to serve an entity type: its collection, URL path, schemas, and the fixed
aggregation report.  The user and game services are two descriptors of the
same pattern; settings choose which ones an app mounts.

Examples:
    >>> USERS.stats.pipeline()[0]["$group"]["_id"]
    '$city'
    >>> resolve_resources(["games"])[0].path
    '/games'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from docspine.core.errors import InvalidConfigError
from docspine.models import (
    CityStats,
    CreateGame,
    CreateUser,
    Document,
    Game,
    GenreStats,
    GroupStats,
    PartialUpdate,
    UpdateGame,
    UpdateUser,
    User,
)


@dataclass(frozen=True, slots=True)
class GroupReport:
    """Group-by report: mean of one field and a count per group, largest first."""

    path: str
    group_by: str
    average_of: str
    average_as: str
    count_as: str
    schema: type[GroupStats]

    def pipeline(self) -> list[dict[str, Any]]:
        return [
            {
                "$group": {
                    "_id": f"${self.group_by}",
                    self.average_as: {"$avg": f"${self.average_of}"},
                    self.count_as: {"$sum": 1},
                }
            },
            {"$sort": {self.count_as: -1}},
        ]


@dataclass(frozen=True, slots=True)
class Resource:
    """Everything needed to serve one entity collection over HTTP."""

    name: str
    collection: str
    path: str
    entity: type[Document]
    create: type[Any]
    update: type[PartialUpdate]
    stats: GroupReport


USERS = Resource(
    name="users",
    collection="users",
    path="/users",
    entity=User,
    create=CreateUser,
    update=UpdateUser,
    stats=GroupReport(
        path="/stats/cities",
        group_by="city",
        average_of="age",
        average_as="avg_age",
        count_as="total_users",
        schema=CityStats,
    ),
)

GAMES = Resource(
    name="games",
    collection="games",
    path="/games",
    entity=Game,
    create=CreateGame,
    update=UpdateGame,
    stats=GroupReport(
        path="/stats/genres",
        group_by="genre",
        average_of="price",
        average_as="avg_price",
        count_as="total_games",
        schema=GenreStats,
    ),
)

REGISTRY: dict[str, Resource] = {r.name: r for r in (USERS, GAMES)}


def resolve_resources(names: Iterable[str]) -> list[Resource]:
    """Look up descriptors by name, preserving order and dropping repeats."""
    resolved: list[Resource] = []
    for name in names:
        resource = REGISTRY.get(name)
        if resource is None:
            raise InvalidConfigError(
                "entities",
                name,
                f"Unknown entity '{name}'. Known: {', '.join(sorted(REGISTRY))}",
            )
        if resource not in resolved:
            resolved.append(resource)
    return resolved
