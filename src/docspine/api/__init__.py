"""
REST API layer for docspine.

Quick start::

    from docspine.api import create_app

    app = create_app()  # ready for uvicorn

Manifesto:
    This package owns the HTTP boundary: routing, serialisation, error
    mapping and request context.  Database access lives in ``docspine.db``.
"""

from docspine.api.app import create_app

__all__ = ["create_app"]
