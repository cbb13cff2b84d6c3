"""Working out which country a place page belongs to.

City pages state their country under a "Country" infobox header; special
administrative regions and Japanese cities use other labels.  Each way of
reading the country is a separate strategy and :func:`resolve_country`
tries them in :data:`STRATEGIES` order, returning the first non-empty answer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import Tag

from medalwiki.extract.render import text_of
from medalwiki.extract.tables import infoboxes
from medalwiki.scraper.models import Document

logger = logging.getLogger(__name__)

CountryStrategy = Callable[[Document], "str | None"]

JAPAN = "Japan"


def _next_data_cell(tag: Tag | None) -> Tag | None:
    if tag is None:
        return None
    return tag.find_next_sibling("td")


def _non_empty(text: str) -> str | None:
    return text or None


def _last_link_or_next_cell(group: Tag | None, label_cell: Tag | None) -> str | None:
    if group is not None:
        anchors = group.find_all("a")
        if anchors:
            return _non_empty(text_of(anchors[-1]))
    cell = _next_data_cell(label_cell)
    if cell is not None:
        return _non_empty(text_of(cell))
    return None


def _first_anchor_titled(document: Document, label: str) -> Tag | None:
    wanted = label.casefold()
    for anchor in document.find_all("a"):
        if text_of(anchor).casefold() == wanted:
            return anchor
    return None


def country_from_header(document: Document) -> str | None:
    """Read the row of the first ``<th>`` whose text is "Country"."""
    for header in document.find_all("th"):
        if text_of(header).casefold() == "country":
            return _last_link_or_next_cell(header.parent, header)
    return None


def country_from_prefecture(document: Document) -> str | None:
    """Pages with an infobox linking to "Prefecture" are Japanese places."""
    if not infoboxes(document):
        return None
    if _first_anchor_titled(document, "prefecture") is not None:
        return JAPAN
    return None


def country_from_sovereign_state(document: Document) -> str | None:
    """Read the row holding a "Sovereign state" link (special regions)."""
    if not infoboxes(document):
        return None
    anchor = _first_anchor_titled(document, "sovereign state")
    if anchor is None:
        return None
    label_cell = anchor.parent
    group = label_cell.parent if label_cell is not None else None
    return _last_link_or_next_cell(group, label_cell)


STRATEGIES: tuple[CountryStrategy, ...] = (
    country_from_header,
    country_from_prefecture,
    country_from_sovereign_state,
)


def resolve_country(
    document: Document | None,
    strategies: tuple[CountryStrategy, ...] = STRATEGIES,
) -> str | None:
    """Return the country *document* describes a place in, or ``None``."""
    if document is None:
        return None
    for strategy in strategies:
        country = strategy(document)
        if country:
            logger.debug("%s -> %s via %s", document.url, country, strategy.__name__)
            return country
    logger.debug("No country found on %s", document.url)
    return None
