"""
docspine — CRUD and aggregation HTTP service over MongoDB collections.

Quick start::

    from docspine.api import create_app

    app = create_app()  # ready for uvicorn
"""

__version__ = "0.1.0"
