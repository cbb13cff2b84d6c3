"""Small string helpers shared by the queries and the CLI."""

from __future__ import annotations

import re
from urllib.parse import unquote

from medalwiki.errors import ParseError

_YEAR_RE = re.compile(r"^(18[0-9]{2}|19[0-9]{2}|20[0-9]{2})$")
_FLAG_RE = re.compile(r"Flag_of_([A-Za-z_\-%()0-9]+?)\.(?:svg|png)", re.IGNORECASE)


def capitalize(text: str, only_first: bool = False) -> str:
    """Title-case *text* word by word, or only its first word.

    Runs of whitespace collapse to single spaces.  With *only_first* the
    remaining words are kept exactly as typed.

    >>> capitalize("united states")
    'United States'
    >>> capitalize("artistic swimming", only_first=True)
    'Artistic swimming'
    """
    words = text.split()
    result = []
    for index, word in enumerate(words):
        if index == 0 or not only_first:
            result.append(word[:1].upper() + word[1:].lower())
        else:
            result.append(word)
    return " ".join(result)


def is_valid_year(text: str) -> bool:
    """True for a four-digit year between 1800 and 2099."""
    return bool(_YEAR_RE.match(text))


def parse_year(text: str) -> int:
    """Parse a user-supplied year, raising :class:`ParseError` if it is not one."""
    candidate = text.strip()
    if not is_valid_year(candidate):
        raise ParseError(f"{text!r} is not a valid year")
    return int(candidate)


def years_in(text: str) -> list[int]:
    """Every whitespace-separated token of *text* that is a valid year."""
    return [int(token) for token in text.split() if is_valid_year(token)]


def flag_file_stem(url: str) -> str:
    """Derive a file name stem from a ``Flag_of_<Country>.svg`` image URL.

    >>> flag_file_stem("//upload.wikimedia.org/.../22px-Flag_of_New_Zealand.svg.png")
    'new_zealand'
    """
    match = _FLAG_RE.search(url)
    if not match:
        return "unknown"
    name = unquote(match.group(1))
    return (
        name.replace(" ", "_")
        .replace("-", "_")
        .replace("(", "")
        .replace(")", "")
        .lower()
    )
