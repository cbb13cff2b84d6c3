"""Flag image handling: download, pixel dump and collage.

Images are saved as ``<country>.png`` in one directory; the collage
(``flagcollage.png``) and the pixel dump (``cheatsheet.csv``) are written
next to them.
"""

from __future__ import annotations

import io
import logging
import math
from collections.abc import Iterable
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from medalwiki.helpers import flag_file_stem
from medalwiki.scraper.source import DocumentSource

logger = logging.getLogger(__name__)

COLLAGE_NAME = "flagcollage.png"
PIXEL_CSV_NAME = "cheatsheet.csv"


def _flag_files(directory: Path) -> list[Path]:
    return sorted(
        path
        for path in directory.glob("*.png")
        if "flagcollage" not in path.name.lower()
    )


def download_flags(
    sources: Iterable[str],
    directory: str | Path,
    source: DocumentSource,
) -> list[Path]:
    """Download every flag in *sources* into *directory* as PNG.

    Files are named after the country in the image URL.  A flag that cannot
    be downloaded or decoded is logged and skipped.
    """
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    saved: list[Path] = []
    for url in sources:
        payload = source.fetch_bytes(url)
        if payload is None:
            continue
        target = folder / f"{flag_file_stem(url)}.png"
        try:
            with Image.open(io.BytesIO(payload)) as image:
                image.convert("RGB").save(target, format="PNG")
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Failed to save %s: %s", target.name, exc)
            continue
        saved.append(target)
    logger.info("Downloaded %d of the flags into %s", len(saved), folder)
    return saved


def flags_to_csv(directory: str | Path) -> Path | None:
    """Dump every flag's pixels to ``cheatsheet.csv``.

    One line per flag: the file stem, then one field per pixel row holding
    that row's colours as space-separated ``RRGGBB`` hex values.  Returns
    ``None`` when the directory has no flags.
    """
    folder = Path(directory)
    flags = _flag_files(folder)
    if not flags:
        logger.warning("No flag images found in %s", folder)
        return None

    target = folder / PIXEL_CSV_NAME
    with target.open("w", encoding="utf-8") as handle:
        for flag in flags:
            try:
                with Image.open(flag) as image:
                    rgb = image.convert("RGB")
            except (UnidentifiedImageError, OSError) as exc:
                logger.warning("Failed to read %s: %s", flag.name, exc)
                continue
            width, height = rgb.size
            pixels = rgb.load()
            fields = [flag.stem]
            for y in range(height):
                fields.append(
                    " ".join("%02X%02X%02X" % pixels[x, y] for x in range(width))
                )
            handle.write(",".join(fields) + "\n")
    return target


def create_collage(directory: str | Path, flag_size: int = 50) -> Path | None:
    """Tile every flag in *directory* into a square grid on a white canvas.

    Each flag is resized to ``flag_size`` x ``flag_size``.  The grid is
    ``ceil(sqrt(n))`` tiles wide and tall, filled row by row.  Returns
    ``None`` when the directory has no flags.
    """
    if flag_size <= 0:
        raise ValueError("flag_size must be positive")
    folder = Path(directory)
    flags = _flag_files(folder)
    if not flags:
        logger.warning("No flag images found in %s", folder)
        return None

    grid = math.ceil(math.sqrt(len(flags)))
    collage = Image.new("RGB", (grid * flag_size, grid * flag_size), "white")
    placed = 0
    for flag in flags:
        try:
            with Image.open(flag) as image:
                tile = image.convert("RGB").resize((flag_size, flag_size))
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Failed to read %s: %s", flag.name, exc)
            continue
        x, y = placed % grid, placed // grid
        collage.paste(tile, (x * flag_size, y * flag_size))
        placed += 1

    target = folder / COLLAGE_NAME
    collage.save(target, format="PNG")
    return target
