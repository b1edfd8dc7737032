"""
Structured error types for docspine.

Every failure the service can report is a :class:`DocSpineError` subclass
carrying a category, a machine-readable ``code`` and optional context.
The HTTP layer never inspects exception types directly; it maps ``code``
to a status through :data:`docspine.api.middleware.errors.ERROR_CODE_TO_STATUS`.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                      DocSpineError                        │
        │            (category, code, context, cause)               │
        ├──────────────────────────────────────────────────────────┤
        │  ConfigError            ValidationError     DatabaseError │
        │  (CONFIG)               (VALIDATION)        (DATABASE)    │
        │     │                       │                   │         │
        │  MissingConfigError     InvalidIdentifier   Database-     │
        │  InvalidConfigError     Error               Connection-   │
        │                                             Error         │
        │                   DocumentNotFoundError (NOT_FOUND)        │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidIdentifierError("not-an-id")
    >>> error.code
    'INVALID_INPUT'
    >>> error.to_dict()["category"]
    'VALIDATION'

    Chaining a driver failure:

    >>> try:
    ...     raise OSError("connection reset")
    ... except OSError as e:
    ...     err = DatabaseError("insert failed", cause=e)
    >>> err.__cause__
    OSError('connection reset')

Tags:
    error-handling, exception-hierarchy, docspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for logging and status mapping."""

    DATABASE = "DATABASE"  # Connection, query, write failures
    VALIDATION = "VALIDATION"  # Malformed request input
    NOT_FOUND = "NOT_FOUND"  # Addressed document does not exist
    CONFIG = "CONFIG"  # Missing or invalid settings
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


class DocSpineError(Exception):
    """
    Base exception for all docspine errors.

    Subclasses set ``default_category`` and ``code``; instances may add
    free-form context for structured logging via :meth:`with_context`.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    code: str = "INTERNAL"

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DocSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise DatabaseError("insert failed").with_context(collection="users")
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "code": self.code,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(DocSpineError):
    """Configuration error. Fatal at startup."""

    default_category = ErrorCategory.CONFIG
    code = "CONFIG"


class MissingConfigError(ConfigError):
    """Required configuration is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}")


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


# =============================================================================
# REQUEST ERRORS
# =============================================================================


class ValidationError(DocSpineError):
    """Request input failed validation."""

    default_category = ErrorCategory.VALIDATION
    code = "INVALID_INPUT"


class InvalidIdentifierError(ValidationError):
    """Path parameter is not a well-formed document identifier."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"'{value}' is not a valid document identifier")


class DocumentNotFoundError(DocSpineError):
    """No document matches the requested identifier."""

    default_category = ErrorCategory.NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, collection: str, document_id: Any):
        self.collection = collection
        self.document_id = document_id
        super().__init__(
            f"Document '{document_id}' not found in '{collection}'",
            context={"collection": collection, "document_id": str(document_id)},
        )


# =============================================================================
# DATABASE ERRORS
# =============================================================================


class DatabaseError(DocSpineError):
    """Database operation failed during a request."""

    default_category = ErrorCategory.DATABASE
    code = "INTERNAL"


class DatabaseConnectionError(DatabaseError):
    """The document store cannot be reached or is not connected."""

    code = "UNAVAILABLE"


__all__ = [
    "ErrorCategory",
    "DocSpineError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "ValidationError",
    "InvalidIdentifierError",
    "DocumentNotFoundError",
    "DatabaseError",
    "DatabaseConnectionError",
]
