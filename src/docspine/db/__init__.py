"""MongoDB access: the process-wide connector and per-collection repositories."""

from docspine.db.mongo import MongoConnector
from docspine.db.repository import EntityRepository

__all__ = ["MongoConnector", "EntityRepository"]
