"""medalwiki CLI — entry-point for every query.

Usage:
    python cli/main.py --help

Each command answers one question about the Summer Olympic Games by walking
Wikipedia pages; ``menu`` offers all of them in an interactive loop.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from medalwiki.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from cli.commands import queries as actions
from cli.commands.menu import run_menu
from cli.session import Session, get_session
from medalwiki.config import settings
from medalwiki.errors import MedalwikiError
from medalwiki.queries import Medal

app = typer.Typer(
    name="medalwiki",
    help="Answer Summer Olympic Games questions from Wikipedia.",
    no_args_is_help=True,
)


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level*; keep HTTP client chatter down."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG | INFO | WARNING | ERROR (default from settings)."
    ),
    no_cache: bool = typer.Option(
        False, "--no-cache", help="Fetch every page again instead of reusing it within a run."
    ),
) -> None:
    """Set up logging and the page session shared by the command."""
    configure_logging(log_level or settings.log_level)
    ctx.obj = Session.create(cache=False if no_cache else None)


def _run(action, *args) -> None:
    try:
        action(*args)
    except MedalwikiError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command("sports")
def sports(
    ctx: typer.Context,
    prefix: str = typer.Argument(..., help="Starting letter(s) of the sport."),
) -> None:
    """List past and present Olympic sports starting with PREFIX."""
    _run(actions.show_sports, get_session(ctx), prefix)


@app.command("obsolete")
def obsolete(
    ctx: typer.Context,
    season: str = typer.Option("summer", help="summer | winter"),
) -> None:
    """List nations that took part in the Games but no longer exist."""
    _run(actions.show_obsolete_nations, get_session(ctx), season)


@app.command("medals")
def medals(
    ctx: typer.Context,
    year: str = typer.Argument(..., help="Year of the Games."),
    threshold: int = typer.Option(1, "--min", help="Minimum number of medals."),
    colour: str = typer.Option("gold", "--colour", help="gold | silver | bronze"),
) -> None:
    """List nations that won at least --min medals of --colour in YEAR."""
    try:
        medal = Medal.from_name(colour)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--colour")
    _run(actions.show_medal_nations, get_session(ctx), threshold, medal, year)


@app.command("sweeps")
def sweeps(
    ctx: typer.Context,
    year: str = typer.Argument(..., help="Year of the Games."),
) -> None:
    """List nations with a podium sweep in YEAR."""
    _run(actions.show_podium_sweeps, get_session(ctx), year)


@app.command("total")
def total(
    ctx: typer.Context,
    country: str = typer.Argument(..., help="Nation, e.g. 'united states'."),
    sport: str = typer.Argument(..., help="Sport, e.g. 'judo'."),
) -> None:
    """Count all medals COUNTRY has won in SPORT."""
    _run(actions.show_total_medals, get_session(ctx), country, sport)


@app.command("headquarters")
def headquarters(
    ctx: typer.Context,
    country: str = typer.Argument(..., help="Country to look for."),
) -> None:
    """Count sports whose governing body is headquartered in COUNTRY."""
    _run(actions.show_headquarters_count, get_session(ctx), country)


@app.command("torch")
def torch(
    ctx: typer.Context,
    country: str = typer.Argument(..., help="Host country."),
    since: str = typer.Argument(..., help="Earliest year to consider."),
) -> None:
    """Countries passed by the longest torch relay of Games hosted in COUNTRY since SINCE."""
    _run(actions.show_torch_relay, get_session(ctx), country, since)


@app.command("flag-bearer")
def flag_bearer(
    ctx: typer.Context,
    country: str = typer.Argument(..., help="Nation."),
    year: str = typer.Argument(..., help="Year of the Games."),
) -> None:
    """Tell whether COUNTRY's flag bearers at the YEAR Games are still alive."""
    _run(actions.show_flag_bearer_status, get_session(ctx), country, year)


@app.command("collage")
def collage(
    ctx: typer.Context,
    year: str = typer.Argument(..., help="Year of the Games."),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", help="Where to write the files."),
    flag_size: Optional[int] = typer.Option(None, "--flag-size", help="Tile edge in pixels."),
) -> None:
    """Download the flags of every nation at the YEAR Games and tile them."""
    _run(actions.make_collage, get_session(ctx), year, out_dir, flag_size)


@app.command("menu")
def menu(ctx: typer.Context) -> None:
    """Interactive numbered menu offering every question."""
    run_menu(get_session(ctx))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
