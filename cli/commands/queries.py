"""One function per question: run the query on a session and print the answer.

These are called both by the one-shot commands in ``cli.main`` and by the
interactive menu in ``cli.commands.menu``.
"""

from __future__ import annotations

from pathlib import Path

import typer

from cli.rendering import echo_names
from cli.session import Session
from medalwiki.config import settings
from medalwiki.helpers import capitalize
from medalwiki.media import create_collage, download_flags, flags_to_csv, write_medal_csv
from medalwiki.queries import Medal


def show_sports(session: Session, prefix: str) -> None:
    names = session.queries.sports_starting_with(prefix, session.home())
    echo_names(names, f"No sports start with {prefix!r}.")


def show_obsolete_nations(session: Session, season: str = "summer") -> None:
    names = session.queries.obsolete_nations(season, session.home())
    echo_names(names, "No obsolete nations found.")


def show_medal_nations(session: Session, threshold: int, medal: Medal, year: str) -> None:
    names = session.queries.medal_nations(threshold, year, medal, session.home())
    echo_names(
        names,
        f"No nation won at least {threshold} {medal.name.lower()} medals in {year}.",
    )


def show_podium_sweeps(session: Session, year: str) -> None:
    names = session.queries.podium_sweeps(year, session.home())
    echo_names(names, f"No podium sweeps found for {year}.")


def show_total_medals(session: Session, country: str, sport: str) -> None:
    country = capitalize(country)
    sport = capitalize(sport, only_first=True)
    typer.echo("This might take a while …")
    total = session.queries.total_medals(country, sport, session.home())
    typer.echo(f"{country} has {total} total medals in {sport}")


def show_headquarters_count(session: Session, country: str) -> None:
    typer.echo("This might take a while …")
    count = session.queries.headquarters_count(country, session.home())
    typer.echo(f"{count} governing bodies are headquartered in {country}")


def show_torch_relay(session: Session, country: str, since_year: str) -> None:
    country = capitalize(country)
    typer.echo("This might take a while …")
    result = session.queries.longest_torch_relay_countries(country, since_year, session.home())
    if result is None:
        typer.echo("No torch relay data available.")
        return
    typer.echo(
        f"Longest torch relay in {country} since {since_year} was {result} countries."
    )


def show_flag_bearer_status(session: Session, country: str, year: str) -> None:
    status = session.queries.flag_bearer_status(country, year, session.home())
    typer.echo(status or "No flag bearer status found.")


def make_collage(
    session: Session,
    year: str,
    out_dir: Path | None = None,
    flag_size: int | None = None,
) -> None:
    """Download the flags of *year*, dump their pixels and medal table, tile them."""
    sources = session.queries.flag_sources(year, session.home())
    typer.echo(f"{len(sources)} flags found.")
    if not sources:
        return
    folder = out_dir or settings.ensure_output_dir()
    typer.echo("Downloading flags. This might take a while …")
    saved = download_flags(sources, folder, session.source)
    typer.echo(f"{len(saved)} flags downloaded into {Path(folder).resolve()}")

    pixels = flags_to_csv(folder)
    if pixels is not None:
        typer.echo(f"CSV file saved: {pixels.resolve()}")

    medals = write_medal_csv(session.queries.medal_rows(year, session.home()), folder)
    typer.echo(f"Medal lookup saved to: {medals.resolve()}")

    collage = create_collage(folder, flag_size or settings.flag_size)
    if collage is not None:
        typer.echo(f"Collage saved to: {collage.resolve()}")
