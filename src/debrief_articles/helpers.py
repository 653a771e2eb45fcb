"""Helper functions for debrief_articles CLI."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from common.cli_helpers import format_date, parse_date


def resolve_paths(materials_dir: str | Path, run_date: date) -> tuple[Path, Path]:
    """Return the (input CSV, output report) paths for a run date.

    Both are named after the date as dd-MM-yyyy inside materials_dir.
    """
    base = Path(materials_dir).expanduser()
    stem = format_date(run_date)
    return base / f"{stem}.csv", base / f"{stem}.txt"


def parse_debrief_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for debrief_articles."""

    parser = argparse.ArgumentParser(
        description="Debrief every article listed in today's CSV into a text report"
    )

    # Input options
    parser.add_argument(
        "--date",
        type=lambda v: parse_date(v, "date"),
        default=None,
        help="Run date (DD-MM-YYYY) used to name input and output files (default: today)",
    )
    parser.add_argument(
        "--materials-dir",
        default=None,
        help="Directory holding the dated CSV and report (default: ~/Materials)",
    )
    parser.add_argument("--input", default=None, help="Explicit input CSV path")
    parser.add_argument("--config", default=None, help="Config name or path to YAML file")

    # Output options
    parser.add_argument("--output", default=None, help="Explicit output report path")
    parser.add_argument(
        "--speech",
        action="store_true",
        help="Convert the report to MP3 afterwards (needs ELEVENLABS_API_KEY)",
    )

    return parser.parse_args(argv)
