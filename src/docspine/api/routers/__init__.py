"""API routers."""

from docspine.api.routers import entities, hello

__all__ = ["entities", "hello"]
