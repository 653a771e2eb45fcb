"""Data models for fetch_articles pipeline stage."""

from dataclasses import dataclass

NO_TITLE = "No title found"


@dataclass
class ArticleContent:
    """Title and whitespace-normalized body text scraped from one article page."""
    url: str
    title: str
    content: str


class FetchError(Exception):
    """Article page could not be downloaded or parsed.

    Only used inside fetch_articles; callers see a None result.
    """

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
