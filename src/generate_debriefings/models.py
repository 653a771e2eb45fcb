"""Data models for generate_debriefings pipeline stage."""

from dataclasses import dataclass, field

NO_SUMMARY = "No summary generated"


@dataclass
class Debriefing:
    """LLM debriefing of one article, paired with its source URL and title."""
    url: str
    title: str
    summary: str


@dataclass(frozen=True)
class ProviderConfig:
    """The LLM backend chosen for a run. Built once at startup, never mutated."""
    name: str
    label: str
    model: str
    api_key: str = field(repr=False)
    max_tokens: int = 500
    temperature: float = 0.7
