"""Fetch, debrief and report every article listed in a CSV file."""

import logging
import time
from pathlib import Path
from typing import Any, Optional

from common.config import DebriefConfig
from debrief_articles.models import RunSummary
from fetch_articles.fetch_article_content import fetch_article_content
from generate_debriefings.generate_debriefings import generate_debriefing
from generate_debriefings.models import Debriefing, ProviderConfig
from generate_debriefings.providers import create_client
from read_links.read_links import read_links
from write_report.write_report import write_report

logger = logging.getLogger(__name__)


class NoLinksError(ValueError):
    """The input CSV exists but yielded no links."""


def load_links(csv_path: Path) -> list[str]:
    """
    Read the run's links.

    Raises:
        FileNotFoundError: If the CSV does not exist
        NoLinksError: If the CSV has no usable links
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    links = read_links(csv_path)
    logger.info("Found %d article links", len(links))
    if not links:
        raise NoLinksError(f"No valid links found in CSV file: {csv_path}")
    return links


def debrief_articles(
    links: list[str],
    provider: ProviderConfig,
    config: DebriefConfig,
    client: Any = None,
) -> list[Debriefing]:
    """Process links one at a time, skipping any that fail to fetch or debrief."""
    if client is None:
        client = create_client(provider)

    debriefings = []
    total = len(links)
    for i, link in enumerate(links, 1):
        logger.info("Processing article %d/%d: %s", i, total, link)

        article = fetch_article_content(
            link,
            max_length=config.fetch.max_content_length,
            timeout=config.fetch.timeout,
            user_agent=config.fetch.user_agent,
            selectors=config.fetch.content_selectors,
        )
        if article is None:
            logger.warning("Skipping article %d due to fetch error", i)
            continue

        debriefing = generate_debriefing(article, provider, client)
        if debriefing is None:
            logger.warning("Skipping article %d due to AI generation error", i)
            continue

        debriefings.append(debriefing)
        logger.info("Successfully processed article %d", i)

        if config.pipeline.request_delay > 0:
            time.sleep(config.pipeline.request_delay)

    return debriefings


def run_pipeline(
    csv_path: Path,
    output_path: Path,
    provider: ProviderConfig,
    config: DebriefConfig,
    client: Any = None,
) -> RunSummary:
    """
    Read links, debrief each article and write the report.

    The report is always written, even when every article was skipped.
    """
    logger.info("Reading CSV from: %s", csv_path)
    logger.info("Output will be saved to: %s", output_path)

    links = load_links(csv_path)
    debriefings = debrief_articles(links, provider, config, client)

    write_report(debriefings, output_path)
    logger.info("Successfully processed %d out of %d articles", len(debriefings), len(links))

    return RunSummary(attempted=len(links), succeeded=len(debriefings), output_path=output_path)
