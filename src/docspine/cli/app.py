"""
Root Typer application for the docspine CLI.
"""

from __future__ import annotations

import typer

from docspine import __version__
from docspine.cli.serve import serve

app = typer.Typer(
    name="docspine",
    help="docspine — CRUD and aggregation HTTP service over MongoDB.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"docspine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """docspine CLI — run the HTTP service."""


app.command("serve", help="Start the API server.")(serve)
