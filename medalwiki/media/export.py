"""CSV export of medal tables."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from medalwiki.queries import MedalRow

MEDAL_CSV_NAME = "medallookup.csv"
MEDAL_CSV_HEADER = ("Country", "Gold", "Silver", "Bronze")


def write_medal_csv(rows: Iterable[MedalRow], directory: str | Path) -> Path:
    """Write *rows* to ``medallookup.csv`` inside *directory* and return its path."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    target = folder / MEDAL_CSV_NAME
    with target.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(MEDAL_CSV_HEADER)
        for row in rows:
            writer.writerow((row.country, row.gold, row.silver, row.bronze))
    return target
