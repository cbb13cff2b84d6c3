"""Exception types raised by medalwiki.

A structural miss (no heading, no table, no matching row) is never an
exception: lookups return ``None`` or an empty collection instead.
"""

from __future__ import annotations


class MedalwikiError(Exception):
    """Base class for all medalwiki errors."""


class ParseError(MedalwikiError, ValueError):
    """A value that must be an integer (medal count, year) is not one."""
