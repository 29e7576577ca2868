"""Smolid CLI.

Usage:
    python -m smolid <command> [options]

Every command prints a JSON object to stdout with an "ok" key and exits
non-zero on failure.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from smolid.errors import SmolidError
from smolid.generator import default_generator
from smolid.models.smolid import Smolid

app = typer.Typer(
    name="smolid",
    help="Smolid — generate and inspect compact 64-bit identifiers.",
    no_args_is_help=True,
)


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: str) -> None:
    _output({"ok": False, "error": error})
    raise typer.Exit(1)


def _describe(sid: Smolid) -> dict:
    return {
        "id": str(sid),
        "value": sid.as_value(),
        "version": sid.version(),
        "valid": sid.is_valid(),
        "nil": sid.is_nil(),
        "type": sid.get_type(),
        "timestamp": sid.timestamp().isoformat(timespec="milliseconds"),
    }


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr")):
    """Generate and inspect smolids."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def new(
    type_: Optional[int] = typer.Option(None, "--type", "-t", help="Type tag (0-127)"),
    count: int = typer.Option(1, "--count", "-n", help="How many to generate"),
):
    """Generate new smolids."""
    if count < 1:
        _fail(f"--count must be at least 1, got {count}")
    try:
        ids = default_generator().generate_many(count, type_)
    except SmolidError as e:
        _fail(str(e))
    _output({"ok": True, "ids": [str(sid) for sid in ids]})


@app.command()
def inspect(smolid: str = typer.Argument(..., help="Smolid in text form")):
    """Decode a smolid and show its fields."""
    try:
        sid = Smolid.parse(smolid)
    except SmolidError as e:
        _fail(str(e))
    _output({"ok": True, **_describe(sid)})


@app.command()
def version() -> None:
    """Show version."""
    from smolid import __version__

    typer.echo(f"smolid v{__version__}")


if __name__ == "__main__":
    app()
