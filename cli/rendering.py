"""Utilities for printing query results in the CLI."""

from __future__ import annotations

from collections.abc import Iterable

import typer

NOTHING_FOUND = "Nothing found."


def echo_names(names: Iterable[str], empty_message: str = NOTHING_FOUND) -> None:
    """Print one name per line in sorted order, or *empty_message* if none."""
    ordered = sorted(names)
    if not ordered:
        typer.echo(empty_message)
        return
    for name in ordered:
        typer.echo(name)
