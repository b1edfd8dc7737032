"""
Common API schemas — RFC 7807 error envelope.

Every non-2xx response produced by docspine itself carries a
:class:`ProblemDetail` body.  Success bodies are the bare entity schemas
from :mod:`docspine.models`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProblemDetail(BaseModel):
    """RFC 7807 «Problem Details for HTTP APIs».

    Example:
        {
            "type": "about:blank",
            "title": "Not Found",
            "status": 404,
            "detail": "Document '65f0...' not found in 'users'",
            "instance": "/users/65f0..."
        }
    """

    type: str = Field(default="about:blank", description="Error type URI (usually 'about:blank')")
    title: str = Field(description="Short human-readable error summary")
    status: int = Field(description="HTTP status code (e.g., 400, 404, 500)")
    detail: str = Field(default="", description="Human-readable explanation of the error")
    instance: str = Field(default="", description="URI of the failing request")
