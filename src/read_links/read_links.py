"""Read article links from a CSV file."""

import csv
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

HEADER_NAMES = ("url", "link")

# Tried in order against each row; falls back to the row's first value.
LINK_FIELDS = ("url", "link", "URL", "Link")


def has_header(first_line: str) -> bool:
    """Return True if the first CSV line is a ``url``/``link`` header."""
    return first_line.strip().lower() in HEADER_NAMES


def resolve_link(row: Mapping[Any, Any]) -> Optional[str]:
    """Pick the URL value out of a parsed CSV row.

    Returns the trimmed value of the first non-empty string candidate, or
    None if the row has nothing usable.
    """
    candidates = [row.get(name) for name in LINK_FIELDS]
    candidates.append(next(iter(row.values()), None))

    for value in candidates:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def read_links(csv_path: str | Path) -> list[str]:
    """
    Read article links from a CSV file, in row order.

    If the first line is ``url`` or ``link`` (any case) it is treated as a
    header and rows are resolved by column name. Otherwise every row,
    including the first, contributes its first field. Rows without a usable
    value are skipped. Duplicates are kept.
    """
    path = Path(csv_path)
    with path.open(newline="", encoding="utf-8-sig") as f:
        first_line = f.readline()
        f.seek(0)

        if has_header(first_line):
            rows: list[Mapping[Any, Any]] = list(csv.DictReader(f))
        else:
            rows = [{0: row[0]} for row in csv.reader(f) if row]

    links = []
    for row in rows:
        link = resolve_link(row)
        if link is None:
            logger.debug("Skipping CSV row without a link: %s", row)
            continue
        links.append(link)

    logger.info("Read %d links from %s", len(links), path)
    return links
