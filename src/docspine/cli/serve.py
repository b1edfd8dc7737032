"""
CLI: ``docspine serve`` — start the API server.

Exit codes:
    0  clean shutdown after SIGINT/SIGTERM
    1  missing or invalid configuration, or the address cannot be bound
    3  startup aborted because MongoDB could not be reached
"""

from __future__ import annotations

import typer
import uvicorn

from docspine.api.deps import get_settings
from docspine.cli.utils import console, err_console
from docspine.core.errors import ConfigError
from docspine.core.logging import configure_logging
from docspine.resources import resolve_resources


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address [default: settings]"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port [default: settings]"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level [default: settings]"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
) -> None:
    """Start the docspine REST API server."""
    try:
        settings = get_settings()
        resolve_resources(settings.entities)
    except ConfigError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    level = (log_level or settings.log_level).upper()
    configure_logging(level=level, json_format=settings.log_json, service=settings.api_title)

    bind_host = host or settings.host
    bind_port = port or settings.port
    console.print(
        f"[bold green]Starting docspine[/bold green] on http://{bind_host}:{bind_port} "
        f"(database: {settings.database_name})"
    )
    uvicorn.run(
        "docspine.api:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_s,
    )
