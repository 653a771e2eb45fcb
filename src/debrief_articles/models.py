"""Data models for debrief_articles pipeline stage."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RunSummary:
    """Outcome of one pipeline run."""
    attempted: int
    succeeded: int
    output_path: Path
