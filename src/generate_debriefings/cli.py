"""CLI for comparing debriefings from every configured provider."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import load_config
from fetch_articles.fetch_article_content import fetch_article_content
from generate_debriefings.compare_providers import COMPARISON_MAX_TOKENS, compare_providers
from generate_debriefings.providers import MissingProviderError

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)

COMPARISON_CONTENT_LENGTH = 2000


def parse_compare_providers_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for compare_providers."""

    parser = argparse.ArgumentParser(
        description="Debrief one article with every configured LLM provider"
    )
    parser.add_argument("url", help="Article URL to debrief")
    parser.add_argument("--config", default=None, help="Config name or path to YAML file")
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=COMPARISON_MAX_TOKENS,
        help=f"Max output tokens per provider (default: {COMPARISON_MAX_TOKENS})",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=COMPARISON_CONTENT_LENGTH,
        help=f"Max article characters sent to the providers (default: {COMPARISON_CONTENT_LENGTH})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_compare_providers_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)

    article = fetch_article_content(
        args.url,
        max_length=args.max_length,
        timeout=config.fetch.timeout,
        user_agent=config.fetch.user_agent,
        selectors=config.fetch.content_selectors,
    )
    if article is None:
        logger.error("Failed to fetch article content from %s", args.url)
        sys.exit(1)

    logger.info("Title: %s", article.title[:100])
    logger.info("Content length: %d characters", len(article.content))

    try:
        results = compare_providers(article, config.providers, max_tokens=args.max_tokens)
    except MissingProviderError as e:
        logger.error("%s", e)
        sys.exit(1)

    failed = [label for label, debriefing in results.items() if debriefing is None]
    if failed:
        logger.error("Failed providers: %s", failed)
        sys.exit(1)


if __name__ == "__main__":
    main()
