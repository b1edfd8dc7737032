"""
Service settings.

All values come from the environment or an optional ``.env`` file.  The
MongoDB connection values keep their historical unprefixed names
(``MONGODB_URI``, ``DATABASE_NAME`` / ``MONGODB_DB_NAME``) for operational
compatibility; every other knob uses the ``DOCSPINE_`` prefix.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from docspine import __version__
from docspine.core.errors import InvalidConfigError, MissingConfigError

# Field name → environment variables that satisfy it, used in error messages.
REQUIRED_ENV: dict[str, tuple[str, ...]] = {
    "mongodb_uri": ("MONGODB_URI",),
    "database_name": ("DATABASE_NAME", "MONGODB_DB_NAME"),
}


class DocSpineSettings(BaseSettings):
    """Settings for the docspine HTTP service.

    Order of precedence (highest → lowest):
        1. Constructor arguments
        2. Environment variables
        3. ``.env`` file
        4. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ── Database ─────────────────────────────────────────────────────────
    mongodb_uri: str = Field(
        validation_alias=AliasChoices("MONGODB_URI", "DOCSPINE_MONGODB_URI"),
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        validation_alias=AliasChoices("DATABASE_NAME", "MONGODB_DB_NAME", "DOCSPINE_DATABASE_NAME"),
        description="Logical database holding the entity collections",
    )
    server_selection_timeout_ms: int = Field(
        default=5000, description="How long the driver waits for a reachable server"
    )

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=3000, description="Bind port")
    shutdown_grace_s: int = Field(
        default=10, description="Seconds to drain in-flight requests on shutdown"
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_title: str = Field(default="docspine", description="OpenAPI title")
    api_version: str = Field(default=__version__, description="OpenAPI version string")
    entities: list[str] = Field(
        default_factory=lambda: ["users", "games"],
        description="Entity collections to mount (users, games)",
    )
    debug: bool = Field(default=False, description="Expose exception text in 500 responses")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool | None = Field(
        default=None, description="JSON logs; unset means JSON unless stdout is a TTY"
    )


def load_settings(**overrides) -> DocSpineSettings:
    """Build settings, translating pydantic failures into config errors.

    Raises:
        MissingConfigError: a required MongoDB value is absent.
        InvalidConfigError: a value is present but cannot be coerced.
    """
    try:
        return DocSpineSettings(**overrides)
    except ValidationError as exc:
        errors = exc.errors()
        for error in errors:
            if error["type"] != "missing":
                continue
            loc = str(error["loc"][0]) if error["loc"] else ""
            for field, names in REQUIRED_ENV.items():
                if loc == field or loc in names:
                    raise MissingConfigError(
                        " or ".join(names),
                        f"{' or '.join(names)} must be set",
                    ) from exc
        first = errors[0]
        key = ".".join(str(part) for part in first["loc"])
        raise InvalidConfigError(key, first.get("input"), f"{key}: {first['msg']}") from exc
