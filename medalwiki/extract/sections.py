"""Locating a labelled section heading inside a page.

The same section ("Medal table", "Participating nations") is tagged as a
top-level heading on one page and as a subsection on another, so the
lookup tries heading levels in a fixed order rather than one fixed level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from bs4 import Tag

from medalwiki.extract.render import text_of
from medalwiki.scraper.models import Document

logger = logging.getLogger(__name__)

HEADING_LEVELS: tuple[str, ...] = ("h2", "h3", "h1")

HeadingMatcher = Callable[[str], bool]


def _first_heading(
    document: Document,
    matches: HeadingMatcher,
    levels: Iterable[str],
) -> Tag | None:
    for level in levels:
        for heading in document.find_all(level):
            if matches(text_of(heading)):
                return heading
    return None


def locate_section(
    document: Document | None,
    label: str,
    levels: Iterable[str] = HEADING_LEVELS,
) -> Tag | None:
    """Return the first heading whose text equals *label*, ignoring case.

    Levels are searched in *levels* order and a later level is only looked at
    when no heading of an earlier level matches.  Returns ``None`` when no
    heading matches at any level.
    """
    if document is None:
        return None
    wanted = label.strip().casefold()
    heading = _first_heading(document, lambda text: text.casefold() == wanted, levels)
    if heading is None:
        logger.debug("No %r heading on %s", label, document.url)
    return heading


def locate_section_containing(
    document: Document | None,
    words: Iterable[str],
    levels: Iterable[str] = HEADING_LEVELS,
) -> Tag | None:
    """Return the first heading whose text contains every one of *words*.

    Matching is a case-insensitive substring test per word, so ``"nation"``
    also matches "Participating nations".
    """
    if document is None:
        return None
    required = [word.casefold() for word in words]
    heading = _first_heading(
        document,
        lambda text: all(word in text.casefold() for word in required),
        levels,
    )
    if heading is None:
        logger.debug("No heading containing %r on %s", required, document.url)
    return heading
