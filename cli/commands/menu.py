"""The interactive numbered menu.

Each option prompts for its parameters, prints the answer and returns to
the selection prompt.  ``0`` reprints the instructions, ``000`` exits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import typer

from cli.commands import queries as actions
from cli.session import Session
from medalwiki.errors import MedalwikiError
from medalwiki.queries import Medal

logger = logging.getLogger(__name__)

INSTRUCTIONS = """\
Welcome to medalwiki!
Answers are scraped live from Wikipedia's Summer Olympic Games articles. You can:

0: Type 0 to repeat the instructions.
000: Type 000 to exit the program.
1. Type 1 to list all past and present Olympic sports that start with {letters}.
2. Type 2 to see all countries that took part in the Olympics but are now obsolete.
3. Type 3 to list all countries that won at least {number} {medal colour} medals in {year}.
4. Type 4 to list all countries that had podium sweeps in {year}.
5. Type 5 to see how many total medals {country} has won in {sport}.
6. Type 6 to see how many governing bodies of Summer Olympic sports are
   headquartered in {country}.
7. Type 7 to answer: among all Summer Olympics hosted in {country} since {year},
   how many countries did the longest torch relay pass through?
8. Type 8 to find out if the flag bearers of {country} from {year} are still alive.
10. Type 10 to build a flag collage of all nations at the Summer Olympics of {year}.
"""

EXIT = "000"
REPEAT = "0"
NEXT = "Next question …"


def _ask(text: str) -> str:
    return typer.prompt(text).strip()


def _ask_medal() -> Medal:
    while True:
        try:
            return Medal.from_name(_ask("Colour of medals (gold, silver or bronze)"))
        except ValueError as exc:
            typer.echo(str(exc))


def _sports(session: Session) -> None:
    actions.show_sports(session, _ask("Starting letter(s)"))


def _obsolete(session: Session) -> None:
    actions.show_obsolete_nations(session)


def _medals(session: Session) -> None:
    threshold = typer.prompt("Minimum number of medals", type=int)
    medal = _ask_medal()
    actions.show_medal_nations(session, threshold, medal, _ask("Year"))


def _sweeps(session: Session) -> None:
    actions.show_podium_sweeps(session, _ask("Year"))


def _total(session: Session) -> None:
    country = _ask("Country")
    actions.show_total_medals(session, country, _ask("Sport"))


def _headquarters(session: Session) -> None:
    actions.show_headquarters_count(session, _ask("Country"))


def _torch(session: Session) -> None:
    country = _ask("Host country")
    actions.show_torch_relay(session, country, _ask("Starting year"))


def _flag_bearer(session: Session) -> None:
    country = _ask("Country")
    actions.show_flag_bearer_status(session, country, _ask("Year"))


def _collage(session: Session) -> None:
    actions.make_collage(session, _ask("Year"))


OPTIONS: dict[str, Callable[[Session], None]] = {
    "1": _sports,
    "2": _obsolete,
    "3": _medals,
    "4": _sweeps,
    "5": _total,
    "6": _headquarters,
    "7": _torch,
    "8": _flag_bearer,
    "10": _collage,
}


def run_menu(session: Session) -> None:
    """Read selections until ``000`` (or end of input)."""
    typer.echo(INSTRUCTIONS)
    while True:
        try:
            choice = typer.prompt("Selection", prompt_suffix="> ").strip()
        except typer.Abort:
            break
        if choice == EXIT:
            typer.echo("Thanks for exploring our data!")
            return
        if choice == REPEAT:
            typer.echo(INSTRUCTIONS)
            continue
        option = OPTIONS.get(choice)
        if option is None:
            typer.echo("Invalid input. Please enter 0, 000, a number from 1 to 8, or 10.")
            continue
        try:
            option(session)
        except typer.Abort:
            break
        except MedalwikiError as exc:
            logger.debug("Query %s failed", choice, exc_info=True)
            typer.echo(f"Error: {exc}")
        typer.echo(NEXT)
