"""Olympic Games questions answered by walking Wikipedia pages.

Every query starts from the home page (by default the "Summer Olympic Games"
article) and follows links from there.  A query method accepts an already
fetched home :class:`~medalwiki.scraper.models.Document` so that interactive
sessions fetch it once; when none is given it is fetched on demand.

Results are plain values: a ``set`` of names, a count, a status string.  A
page or table that cannot be found yields the empty value for that query
rather than an exception.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from bs4 import Tag

from medalwiki.extract.country import resolve_country
from medalwiki.extract.render import mixed_links, own_text, render_mixed, text_of
from medalwiki.extract.sections import locate_section, locate_section_containing
from medalwiki.extract.tables import (
    any_of,
    cell_from_end,
    collect_rows,
    data_cells,
    filter_by_threshold,
    find_table_after,
    first_link,
    has_class,
    infobox_row,
    infobox_rows,
    infoboxes,
    is_table,
    parse_int,
    sum_by_key,
    table_rows,
)
from medalwiki.helpers import capitalize, parse_year, years_in
from medalwiki.scraper.models import Document, Link
from medalwiki.walker import PageGraphWalker

logger = logging.getLogger(__name__)

NO_FLAG_BEARERS = "No flag bearers known!"
TORCH_RELAY_FLOOR = 2

MEDAL_TABLE = "Medal table"
PODIUM_SWEEPS = "Podium sweeps"
PARTICIPATING_NATIONS = ("participating", "nation")
TORCH_RELAYS_TITLE = "List of Olympic torch relays"
PARTICIPATING_TITLE = "List of participating nations at the {season} Olympic Games"

# Positions of navigation blocks on the home page.  These follow the current
# article layout and break silently if it is reorganised.
GAMES_HLIST_INDEX = 5
MEDAL_TABLES_TABLE_INDEX = 3
PODIUM_SWEEP_NOC_CELL = 3


class Medal(enum.IntEnum):
    """Medal colour, valued as its column position counted from the row end.

    Medal table rows end with ``gold, silver, bronze, total``.
    """

    GOLD = 4
    SILVER = 3
    BRONZE = 2

    @classmethod
    def from_name(cls, name: str) -> Medal:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown medal colour {name!r}; use gold, silver or bronze") from None


@dataclass(frozen=True)
class MedalRow:
    """One nation's line of an edition's medal table."""

    country: str
    gold: int
    silver: int
    bronze: int


class OlympicsQueries:
    """The question catalogue, bound to a walker and a home page URL."""

    def __init__(self, walker: PageGraphWalker, home_url: str) -> None:
        self.walker = walker
        self.home_url = home_url

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def home(self, home: Document | None = None) -> Document | None:
        """Return *home*, or fetch the home page when it is not given."""
        if home is not None:
            return home
        return self.walker.fetch(self.home_url)

    def sports_table(self, home: Document | None = None) -> Tag | None:
        page = self.home(home)
        if page is None:
            return None
        return page.select_one("table.wikitable.sortable")

    def sport_links(self, home: Document | None = None) -> list[Link]:
        """The first link of every row in the home page's sports table."""

        def row_link(row: Tag) -> Link | None:
            anchor = first_link(row)
            return Link.from_anchor(anchor) if anchor is not None else None

        return collect_rows(self.sports_table(home), row_link)

    def games_page(self, year: str, home: Document | None = None) -> Document | None:
        """The article on the Games of *year*, via the home page year lists."""
        page = self.home(home)
        if page is None:
            return None
        lists = page.select(".hlist")
        if len(lists) <= GAMES_HLIST_INDEX:
            logger.debug("Home page has only %d .hlist blocks", len(lists))
            return None
        for item in lists[GAMES_HLIST_INDEX].find_all("li"):
            anchor = item.find("a")
            if anchor is not None and text_of(anchor) == year.strip():
                return self.walker.follow(anchor)
        return None

    def medal_table_page(self, year: str, home: Document | None = None) -> Document | None:
        """The "<year> Summer Olympics medal table" article."""
        page = self.home(home)
        if page is None:
            return None
        tables = page.select("table.wikitable")
        if len(tables) <= MEDAL_TABLES_TABLE_INDEX:
            logger.debug("Home page has only %d wikitables", len(tables))
            return None
        rows = tables[MEDAL_TABLES_TABLE_INDEX].find_all("tr")
        if not rows:
            return None
        plainlist = rows[-1].select_one(".plainlist")
        listing = plainlist.find("ul") if plainlist is not None else None
        if listing is None:
            return None
        for item in listing.find_all("li"):
            anchor = item.find("a")
            if anchor is not None and text_of(anchor) == year.strip():
                return self.walker.follow(anchor)
        return None

    def participating_nations_page(
        self, season: str = "summer", home: Document | None = None
    ) -> Document | None:
        page = self.home(home)
        if page is None:
            return None
        title = PARTICIPATING_TITLE.format(season=capitalize(season, only_first=True))
        anchors = page.select(f'a[title="{title}"]')
        if not anchors:
            return None
        return self.walker.follow(anchors[-1])

    def torch_relays_page(self, home: Document | None = None) -> Document | None:
        page = self.home(home)
        if page is None:
            return None
        sidebar = page.select_one("table.sidebar")
        if sidebar is None:
            return None
        return self.walker.follow(sidebar.select_one(f'a[title="{TORCH_RELAYS_TITLE}"]'))

    # ------------------------------------------------------------------
    # 1. Sports by prefix
    # ------------------------------------------------------------------

    def sports_starting_with(self, prefix: str, home: Document | None = None) -> set[str]:
        """Lower-cased names of the sports whose name starts with *prefix*."""
        wanted = prefix.strip().lower()

        def name_of(row: Tag) -> str | None:
            cell = row.select_one(":scope > td:first-child")
            if cell is None:
                return None
            name = text_of(cell).lower()
            return name if name.startswith(wanted) else None

        table = self.sports_table(home)
        return set(collect_rows(table, name_of, skip_header=True))

    # ------------------------------------------------------------------
    # 2. Obsolete nations
    # ------------------------------------------------------------------

    def obsolete_nations(self, season: str = "summer", home: Document | None = None) -> set[str]:
        """Nations that took part in the Games but no longer exist.

        The participating-nations list shades the first cell of such rows
        grey (``bgcolor="#e0e0e0"``).
        """
        page = self.participating_nations_page(season, home)
        if page is None:
            return set()

        def shaded_nation(row: Tag) -> str | None:
            cell = row.select_one(':scope > td[bgcolor="#e0e0e0" i]:first-child')
            if cell is None:
                return None
            anchor = cell.find("a")
            return text_of(anchor) if anchor is not None else None

        return set(collect_rows(page.select_one("table.wikitable"), shaded_nation))

    # ------------------------------------------------------------------
    # 3. Nations over a medal threshold
    # ------------------------------------------------------------------

    def medal_nations(
        self,
        threshold: int,
        year: str,
        medal: Medal,
        home: Document | None = None,
    ) -> set[str]:
        """Nations that won at least *threshold* medals of colour *medal* in *year*."""
        page = self.medal_table_page(year, home)
        if page is None:
            return set()
        return filter_by_threshold(page.select_one("table.wikitable"), int(medal), threshold)

    def medal_rows(self, year: str, home: Document | None = None) -> list[MedalRow]:
        """Gold/silver/bronze counts for every row of the *year* medal table."""
        page = self.medal_table_page(year, home)
        if page is None:
            return []

        def to_row(row: Tag) -> MedalRow | None:
            if len(data_cells(row)) < Medal.GOLD:
                return None
            anchor = first_link(row)
            return MedalRow(
                country=text_of(anchor) if anchor is not None else "Unknown",
                gold=parse_int(cell_from_end(row, Medal.GOLD)),
                silver=parse_int(cell_from_end(row, Medal.SILVER)),
                bronze=parse_int(cell_from_end(row, Medal.BRONZE)),
            )

        return collect_rows(page.select_one("table.wikitable"), to_row)

    # ------------------------------------------------------------------
    # 4. Podium sweeps
    # ------------------------------------------------------------------

    def podium_sweeps(self, year: str, home: Document | None = None) -> set[str]:
        """Nations that took all three medals of some event in *year*."""
        page = self.games_page(year, home)
        table = find_table_after(locate_section(page, PODIUM_SWEEPS))

        def sweeper(row: Tag) -> str | None:
            cells = data_cells(row)
            if len(cells) <= PODIUM_SWEEP_NOC_CELL:
                return None
            anchor = cells[PODIUM_SWEEP_NOC_CELL].find("a")
            return text_of(anchor) if anchor is not None else None

        return set(collect_rows(table, sweeper, skip_header=True))

    # ------------------------------------------------------------------
    # 5. Medals per nation in a sport
    # ------------------------------------------------------------------

    def total_medals(self, country: str, sport: str, home: Document | None = None) -> int:
        """All-time medal total of *country* in *sport*.

        Summed over every row of the sport's medal table that names the
        country, since a nation can be listed more than once.
        """
        link = next((lnk for lnk in self.sport_links(home) if lnk.text == sport), None)
        if link is None:
            logger.debug("No sport called %r in the sports table", sport)
            return 0
        page = self.walker.follow(link)
        table = find_table_after(locate_section(page, MEDAL_TABLE))
        return sum_by_key(table, country, column_from_end=1)

    # ------------------------------------------------------------------
    # 6. Governing bodies by headquarters country
    # ------------------------------------------------------------------

    def governing_body_page(self, sport_page: Document) -> Document | None:
        row = infobox_row(sport_page, {"Governing body"})
        if row is None:
            return None
        return self.walker.follow(row.find("a"))

    def headquarters_count(self, country: str, home: Document | None = None) -> int:
        """How many sports' governing bodies are headquartered in *country*."""

        def per_sport(sport_page: Document) -> int:
            return is_headquartered_in(self.governing_body_page(sport_page), country)

        return self.walker.sum_over(self.sport_links(home), per_sport)

    # ------------------------------------------------------------------
    # 7. Torch relays
    # ------------------------------------------------------------------

    def longest_torch_relay_countries(
        self,
        country: str,
        since_year: str,
        home: Document | None = None,
        floor: int = TORCH_RELAY_FLOOR,
    ) -> int | None:
        """Most countries any relay for Games hosted by *country* passed through.

        Only relays whose row names a year at or after *since_year* count.
        Each relay's stops are the links in the row's last cell; every stop
        page is resolved to its country and the distinct ones are counted.
        Counts below *floor* are reported as *floor*.  Returns ``None`` when
        the relay list page cannot be reached.

        Raises:
            ParseError: If *since_year* is not a year.
        """
        since = parse_year(since_year)
        page = self.torch_relays_page(home)
        if page is None:
            return None

        best = floor
        for row in table_rows(page.select_one("table.sortable.wikitable")):
            first_cell = row.find("td")
            if first_cell is None:
                continue
            flag_link = first_cell.select_one("span.flagicon a")
            if flag_link is None or flag_link.get("title") != country:
                continue
            anchors = first_cell.find_all("a")
            if not anchors or not any(y >= since for y in years_in(text_of(anchors[-1]))):
                continue
            logger.info("Checking relay %s", text_of(anchors[-1]))
            stops = mixed_links(data_cells(row)[-1])
            seen = self.walker.count_distinct(stops, resolve_country)
            best = max(best, seen)
        return best

    # ------------------------------------------------------------------
    # 8. Flag bearers
    # ------------------------------------------------------------------

    def delegation_page(self, country: str, year: str, home: Document | None = None) -> Document | None:
        """The "<country> at the <year> Summer Olympics" article."""
        page = self.medal_table_page(year, home)
        table = find_table_after(locate_section(page, MEDAL_TABLE))
        for row in table_rows(table):
            anchor = first_link(row)
            if anchor is not None and text_of(anchor) == country:
                return self.walker.follow(anchor)
        return None

    def flag_bearer_links(self, delegation: Document | None) -> list[Link]:
        """Links to every flag bearer listed in the delegation infobox."""
        links: list[Link] = []
        for row, header in infobox_rows(delegation):
            label = header if "Flag bearer" in text_of(header) else first_link(row)
            if label is None or "Flag bearer" not in text_of(label):
                continue
            cell = row.find("td")
            if cell is None:
                continue
            for anchor in cell.find_all("a"):
                link = Link.from_anchor(anchor)
                if link is not None and link not in links:
                    links.append(link)
        return links

    def flag_bearer_status(self, country: str, year: str, home: Document | None = None) -> str:
        """Whether each flag bearer of *country* at the *year* Games has died."""
        bearers = self.flag_bearer_links(self.delegation_page(country, year, home))
        if not bearers:
            return NO_FLAG_BEARERS

        base = self.walker.source.base_url
        order = {link.resolve(base): index for index, link in enumerate(bearers)}
        names = {link.resolve(base): link.text for link in bearers}

        def status(person: Document) -> tuple[int, str] | None:
            line = person_status(names.get(person.url, person.url), person)
            return (order.get(person.url, len(order)), line) if line else None

        lines = sorted(self.walker.fan_out(bearers, status))
        return "\n\n".join(line for _, line in lines)

    # ------------------------------------------------------------------
    # 10. Participating flags
    # ------------------------------------------------------------------

    def flag_sources(self, year: str, home: Document | None = None) -> list[str]:
        """Image URLs of the flag of every nation taking part in *year*."""
        page = self.games_page(year, home)
        heading = locate_section_containing(page, PARTICIPATING_NATIONS)
        table = find_table_after(heading, any_of(is_table, has_class("wikitable")))
        sources: list[str] = []
        for row in table_rows(table):
            for item in row.find_all("li"):
                image = item.find("img")
                if image is None or not image.get("src"):
                    continue
                src = str(image["src"])
                sources.append("https:" + src if src.startswith("//") else src)
        return sources


# ---------------------------------------------------------------------------
# Page-level tests
# ---------------------------------------------------------------------------

def is_headquartered_in(document: Document | None, country: str) -> int:
    """``1`` if the infobox "Headquarters" value names *country*, else ``0``.

    The value is compared word by word ("Lausanne, Switzerland") and, for
    multi-word countries, part by comma-separated part.
    """
    row = infobox_row(document, {"Headquarters"})
    if row is None:
        return 0
    value = render_mixed(row.find("td"))
    wanted = country.strip().casefold()
    if not wanted:
        return 0
    words = value.replace(",", " ").casefold().split()
    parts = [part.strip().casefold() for part in value.split(",")]
    return 1 if wanted in words or wanted in parts else 0


def person_status(name: str, document: Document | None) -> str:
    """One line saying whether the person on *document* has died.

    Reads the first infobox with a "Died" row; an infobox without one means
    the person is alive.  A page with no infobox gives no status (``""``).
    """
    for box in infoboxes(document):
        died = next((th for th in box.find_all("th") if own_text(th) == "Died"), None)
        if died is None:
            return f"{name} is still alive."
        cell = died.find_next_sibling("td")
        if cell is not None:
            return f"{name} passed away: {render_mixed(cell)}"
    return ""
