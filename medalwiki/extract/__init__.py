"""Heuristic extraction from encyclopedia-style page markup."""

from medalwiki.extract.country import resolve_country
from medalwiki.extract.render import mixed_links, own_text, render_mixed, text_of
from medalwiki.extract.sections import locate_section, locate_section_containing
from medalwiki.extract.tables import (
    collect_rows,
    filter_by_threshold,
    find_table_after,
    sum_by_key,
    table_rows,
)

__all__ = [
    "resolve_country",
    "render_mixed",
    "mixed_links",
    "own_text",
    "text_of",
    "locate_section",
    "locate_section_containing",
    "find_table_after",
    "table_rows",
    "sum_by_key",
    "filter_by_threshold",
    "collect_rows",
]
