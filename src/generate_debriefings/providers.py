"""LLM provider selection and SDK clients."""

import logging
import os
from typing import Any, Mapping, Optional

from anthropic import Anthropic
from openai import OpenAI

from common.config import ProvidersConfig
from generate_debriefings.models import ProviderConfig

logger = logging.getLogger(__name__)

OPENAI = "openai"
ANTHROPIC = "anthropic"

# Preference order: the first provider with a credential wins.
PROVIDER_ENV_KEYS = {
    OPENAI: "OPENAI_API_KEY",
    ANTHROPIC: "ANTHROPIC_API_KEY",
}

PROVIDER_LABELS = {
    OPENAI: "OpenAI",
    ANTHROPIC: "Claude",
}


class MissingProviderError(RuntimeError):
    """No LLM provider credential is configured."""


def _build_provider(name: str, api_key: str, settings: ProvidersConfig) -> ProviderConfig:
    model_config = getattr(settings, name)
    return ProviderConfig(
        name=name,
        label=PROVIDER_LABELS[name],
        model=model_config.model,
        api_key=api_key,
        max_tokens=model_config.max_tokens,
        temperature=model_config.temperature,
    )


def available_providers(
    settings: Optional[ProvidersConfig] = None,
    env: Optional[Mapping[str, str]] = None,
) -> list[ProviderConfig]:
    """All providers with a non-empty credential, in preference order."""
    settings = settings or ProvidersConfig()
    env = os.environ if env is None else env

    providers = []
    for name, env_key in PROVIDER_ENV_KEYS.items():
        api_key = env.get(env_key)
        if api_key:
            providers.append(_build_provider(name, api_key, settings))
    return providers


def select_provider(
    settings: Optional[ProvidersConfig] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ProviderConfig:
    """
    Choose the single provider used for a whole run.

    OpenAI if OPENAI_API_KEY is set, else Anthropic if ANTHROPIC_API_KEY is
    set.

    Raises:
        MissingProviderError: If neither credential is set.
    """
    providers = available_providers(settings, env)
    if not providers:
        raise MissingProviderError(
            "Neither OPENAI_API_KEY nor ANTHROPIC_API_KEY environment variable is set"
        )

    provider = providers[0]
    logger.info("Using %s API for content generation (model=%s)", provider.label, provider.model)
    return provider


def create_client(provider: ProviderConfig) -> Any:
    """Build the SDK client for a provider."""
    if provider.name == OPENAI:
        return OpenAI(api_key=provider.api_key)
    if provider.name == ANTHROPIC:
        return Anthropic(api_key=provider.api_key)
    raise ValueError(f"Unknown provider: {provider.name}")
