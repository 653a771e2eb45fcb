"""Core debriefing generation logic."""

import logging
import re
from typing import Any, Optional

from fetch_articles.models import ArticleContent
from generate_debriefings.instructions import DEBRIEFING_PROMPT
from generate_debriefings.models import NO_SUMMARY, Debriefing, ProviderConfig
from generate_debriefings.providers import ANTHROPIC, OPENAI, create_client

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(title|content)\}")


def build_prompt(article: ArticleContent, template: str = DEBRIEFING_PROMPT) -> str:
    """Substitute title and content into the template, once each and literally.

    Substituted text is never rescanned, so braces inside an article cannot
    pull in other fields.
    """
    values = {"title": article.title, "content": article.content}

    def substitute(match: re.Match) -> str:
        return values.pop(match.group(1), match.group(0))

    return _PLACEHOLDER.sub(substitute, template)


def _openai_summary(client: Any, provider: ProviderConfig, prompt: str) -> Optional[str]:
    response = client.chat.completions.create(
        model=provider.model,
        messages=[{"role": "user", "content": prompt}],
        max_tokens=provider.max_tokens,
        temperature=provider.temperature,
    )
    if not response.choices:
        return None
    return response.choices[0].message.content


def _anthropic_summary(client: Any, provider: ProviderConfig, prompt: str) -> Optional[str]:
    response = client.messages.create(
        model=provider.model,
        max_tokens=provider.max_tokens,
        temperature=provider.temperature,
        messages=[{"role": "user", "content": prompt}],
    )
    if not response.content or response.content[0].type != "text":
        return None
    return response.content[0].text


def request_summary(client: Any, provider: ProviderConfig, prompt: str) -> str:
    """Ask the provider for a summary; NO_SUMMARY if it returns no usable text."""
    if provider.name == OPENAI:
        text = _openai_summary(client, provider, prompt)
    elif provider.name == ANTHROPIC:
        text = _anthropic_summary(client, provider, prompt)
    else:
        raise ValueError(f"Unknown provider: {provider.name}")

    text = (text or "").strip()
    return text or NO_SUMMARY


def generate_debriefing(
    article: ArticleContent,
    provider: ProviderConfig,
    client: Any = None,
) -> Optional[Debriefing]:
    """
    Generate a debriefing for one article with the run's provider.

    Args:
        article: Fetched article title and content
        provider: Provider chosen at startup
        client: SDK client for the provider (built from provider if None)

    Returns:
        Debriefing, or None if the provider call failed
    """
    prompt = build_prompt(article)
    try:
        if client is None:
            client = create_client(provider)
        summary = request_summary(client, provider, prompt)
    except Exception as e:
        logger.error("Error generating debriefing for %s with %s: %s", article.url, provider.label, e)
        return None

    return Debriefing(url=article.url, title=article.title, summary=summary)
