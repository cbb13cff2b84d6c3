"""Finding data tables next to a heading and pulling values out of their rows.

Rows that do not have the expected shape (no anchor, too few cells) are
skipped.  A cell that must hold an integer and does not raises
:class:`~medalwiki.errors.ParseError`: that is a data-shape violation, not a
missing value.

Column positions are counted from the *end* of a row (``1`` is the last data
cell).  Medal tables put a variable number of rank/name cells in front but
always end with gold, silver, bronze, total.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from bs4 import Tag

from medalwiki.errors import ParseError
from medalwiki.extract.render import text_of
from medalwiki.scraper.models import Document

logger = logging.getLogger(__name__)

T = TypeVar("T")
TagPredicate = Callable[[Tag], bool]


# ---------------------------------------------------------------------------
# Stop predicates
# ---------------------------------------------------------------------------

def is_table(tag: Tag) -> bool:
    return tag.name == "table"


def has_class(name: str) -> TagPredicate:
    """Predicate: the element carries CSS class *name*."""

    def predicate(tag: Tag) -> bool:
        return name in (tag.get("class") or [])

    return predicate


def any_of(*predicates: TagPredicate) -> TagPredicate:
    """Predicate: at least one of *predicates* holds."""

    def predicate(tag: Tag) -> bool:
        return any(p(tag) for p in predicates)

    return predicate


# ---------------------------------------------------------------------------
# Table resolution
# ---------------------------------------------------------------------------

def find_table_after(anchor: Tag | None, stop: TagPredicate = is_table) -> Tag | None:
    """Return the first element after *anchor*'s parent that satisfies *stop*.

    Only the following siblings of the parent are examined, in document
    order; the walk neither descends into them nor climbs further up.  This
    matches headings wrapped in a block (``<div class="mw-heading"><h2>``)
    with the table a few paragraphs later.
    """
    if anchor is None or anchor.parent is None:
        return None
    for sibling in anchor.parent.next_siblings:
        if isinstance(sibling, Tag) and stop(sibling):
            return sibling
    return None


def table_rows(table: Tag | None, skip_header: bool = False) -> list[Tag]:
    """Return the ``<tr>`` rows of *table* (of its first ``<tbody>`` if any)."""
    if table is None:
        return []
    body = table.find("tbody") or table
    rows = body.find_all("tr")
    return rows[1:] if skip_header else rows


def first_link(row: Tag) -> Tag | None:
    return row.find("a")


def data_cells(row: Tag) -> list[Tag]:
    return row.find_all("td")


def cell_from_end(row: Tag, column_from_end: int) -> Tag | None:
    """Return the data cell *column_from_end* places from the row end, if present."""
    if column_from_end < 1:
        raise ValueError("column_from_end counts from 1")
    cells = data_cells(row)
    if len(cells) < column_from_end:
        return None
    return cells[-column_from_end]


def parse_int(cell: Tag | str) -> int:
    """Parse a count cell such as ``"12"`` or ``"1,024"``."""
    text = cell if isinstance(cell, str) else text_of(cell)
    try:
        return int(text.replace(",", "").strip())
    except ValueError as exc:
        raise ParseError(f"expected an integer, got {text!r}") from exc


# ---------------------------------------------------------------------------
# Row extraction
# ---------------------------------------------------------------------------

def sum_by_key(
    table: Tag | None,
    key: str,
    column_from_end: int = 1,
    skip_header: bool = False,
) -> int:
    """Sum the numeric column of every row whose first link text equals *key*.

    A key may appear in several rows (shared ranks, separate events); all of
    them are added up.
    """
    total = 0
    for row in table_rows(table, skip_header):
        anchor = first_link(row)
        if anchor is None or text_of(anchor) != key:
            continue
        cell = cell_from_end(row, column_from_end)
        if cell is None:
            continue
        total += parse_int(cell)
    return total


def filter_by_threshold(
    table: Tag | None,
    column_from_end: int,
    threshold: int,
    skip_header: bool = False,
) -> set[str]:
    """Return the first-link text of every row whose column is >= *threshold*."""
    names: set[str] = set()
    for row in table_rows(table, skip_header):
        cell = cell_from_end(row, column_from_end)
        if cell is None:
            continue
        if parse_int(cell) < threshold:
            continue
        anchor = first_link(row)
        if anchor is not None:
            names.add(text_of(anchor))
    return names


def collect_rows(
    table: Tag | None,
    extract: Callable[[Tag], T | None],
    skip_header: bool = False,
) -> list[T]:
    """Map every row through *extract*, keeping the non-``None`` results in order."""
    values: list[T] = []
    for row in table_rows(table, skip_header):
        value = extract(row)
        if value is not None:
            values.append(value)
    return values


# ---------------------------------------------------------------------------
# Infoboxes
# ---------------------------------------------------------------------------

def infoboxes(document: Document | None) -> list[Tag]:
    if document is None:
        return []
    return document.select("table.infobox")


def infobox_rows(document: Document | None) -> Iterator[tuple[Tag, Tag]]:
    """Yield ``(row, header_cell)`` for each labelled row of the first infobox."""
    boxes = infoboxes(document)
    if not boxes:
        return
    for row in boxes[0].find_all("tr"):
        header = row.find("th")
        if header is not None:
            yield row, header


def infobox_row(document: Document | None, labels: Iterable[str]) -> Tag | None:
    """Return the first infobox row whose header text is one of *labels*."""
    wanted = set(labels)
    for row, header in infobox_rows(document):
        if text_of(header) in wanted:
            return row
    return None
