"""
CLI layer for docspine.

Entry point::

    docspine --help
    docspine serve --port 3000
"""

from docspine.cli.app import app

__all__ = ["app"]
