"""API schemas package."""

from docspine.api.schemas.common import ProblemDetail

__all__ = ["ProblemDetail"]
