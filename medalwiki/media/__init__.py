"""Generated artifacts: medal CSVs, flag downloads, pixel dumps, collages."""

from medalwiki.media.export import write_medal_csv
from medalwiki.media.flags import create_collage, download_flags, flags_to_csv

__all__ = ["write_medal_csv", "download_flags", "flags_to_csv", "create_collage"]
