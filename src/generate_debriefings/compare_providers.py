"""Query every configured provider for the same article, for side-by-side comparison."""

import logging
from dataclasses import replace
from typing import Optional

from common.config import ProvidersConfig
from fetch_articles.models import ArticleContent
from generate_debriefings.generate_debriefings import generate_debriefing
from generate_debriefings.models import Debriefing
from generate_debriefings.providers import MissingProviderError, available_providers

logger = logging.getLogger(__name__)

COMPARISON_MAX_TOKENS = 300


def compare_providers(
    article: ArticleContent,
    settings: Optional[ProvidersConfig] = None,
    max_tokens: int = COMPARISON_MAX_TOKENS,
) -> dict[str, Optional[Debriefing]]:
    """
    Generate a debriefing with each provider that has a credential.

    Not part of the production pipeline, which uses exactly one provider.

    Returns:
        Mapping of provider label to its Debriefing (None on failure)

    Raises:
        MissingProviderError: If no provider credential is set.
    """
    providers = available_providers(settings)
    if not providers:
        raise MissingProviderError(
            "No API keys found. Set OPENAI_API_KEY and/or ANTHROPIC_API_KEY"
        )

    results: dict[str, Optional[Debriefing]] = {}
    for provider in providers:
        provider = replace(provider, max_tokens=max_tokens)
        logger.info("Generating debriefing with %s...", provider.label)
        debriefing = generate_debriefing(article, provider)
        if debriefing is None:
            logger.error("%s debriefing failed", provider.label)
        else:
            logger.info(
                "%s debriefing successful (%d characters): %s...",
                provider.label,
                len(debriefing.summary),
                debriefing.summary[:150],
            )
        results[provider.label] = debriefing
    return results
