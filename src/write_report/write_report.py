"""Render debriefings into the flat text report."""

import logging
from pathlib import Path
from typing import Iterable

from generate_debriefings.models import Debriefing

logger = logging.getLogger(__name__)

DIVIDER = "=" * 80


def format_entry(index: int, debriefing: Debriefing) -> str:
    """Render one debriefing as a numbered section (index is 1-based)."""
    return (
        f"\n=== ARTICLE {index} ===\n"
        f"URL: {debriefing.url}\n"
        f"TITLE: {debriefing.title}\n"
        "\n"
        "DEBRIEFING:\n"
        f"{debriefing.summary}\n"
        "\n"
        f"{DIVIDER}\n"
    )


def format_report(debriefings: Iterable[Debriefing]) -> str:
    """Render all debriefings in input order; no debriefings gives an empty string."""
    return "\n".join(format_entry(i, d) for i, d in enumerate(debriefings, 1))


def write_report(debriefings: list[Debriefing], output_path: str | Path) -> Path:
    """Write the report, overwriting any existing file at output_path."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_report(debriefings), encoding="utf-8")
    logger.info("Debriefings saved to: %s", path)
    return path
