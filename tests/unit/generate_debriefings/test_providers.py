"""Tests for generate_debriefings.providers module."""

from unittest.mock import patch

import pytest

from common.config import ModelConfig, ProvidersConfig
from generate_debriefings.providers import (
    MissingProviderError,
    available_providers,
    create_client,
    select_provider,
)


class TestSelectProvider:
    def test_openai_preferred_when_both_set(self) -> None:
        provider = select_provider(env={"OPENAI_API_KEY": "sk", "ANTHROPIC_API_KEY": "ak"})
        assert provider.name == "openai"
        assert provider.api_key == "sk"
        assert provider.model == "gpt-3.5-turbo"

    def test_anthropic_when_only_anthropic_set(self) -> None:
        provider = select_provider(env={"ANTHROPIC_API_KEY": "ak"})
        assert provider.name == "anthropic"
        assert provider.label == "Claude"
        assert provider.model == "claude-3-haiku-20240307"

    def test_empty_credential_is_ignored(self) -> None:
        provider = select_provider(env={"OPENAI_API_KEY": "", "ANTHROPIC_API_KEY": "ak"})
        assert provider.name == "anthropic"

    def test_raises_without_credentials(self) -> None:
        with pytest.raises(MissingProviderError):
            select_provider(env={})

    def test_uses_configured_model_settings(self) -> None:
        settings = ProvidersConfig(openai=ModelConfig(model="gpt-4o-mini", max_tokens=300, temperature=0.2))
        provider = select_provider(settings, env={"OPENAI_API_KEY": "sk"})
        assert provider.model == "gpt-4o-mini"
        assert provider.max_tokens == 300
        assert provider.temperature == 0.2

    def test_reads_process_environment_by_default(self, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-env")
        assert select_provider().api_key == "ak-env"

    def test_repr_hides_api_key(self) -> None:
        provider = select_provider(env={"OPENAI_API_KEY": "sk-secret"})
        assert "sk-secret" not in repr(provider)


class TestAvailableProviders:
    def test_preference_order(self) -> None:
        providers = available_providers(env={"ANTHROPIC_API_KEY": "ak", "OPENAI_API_KEY": "sk"})
        assert [p.name for p in providers] == ["openai", "anthropic"]

    def test_none_available(self) -> None:
        assert available_providers(env={}) == []


class TestCreateClient:
    @patch("generate_debriefings.providers.OpenAI")
    def test_openai_client(self, mock_openai) -> None:
        provider = select_provider(env={"OPENAI_API_KEY": "sk"})
        assert create_client(provider) is mock_openai.return_value
        mock_openai.assert_called_once_with(api_key="sk")

    @patch("generate_debriefings.providers.Anthropic")
    def test_anthropic_client(self, mock_anthropic) -> None:
        provider = select_provider(env={"ANTHROPIC_API_KEY": "ak"})
        assert create_client(provider) is mock_anthropic.return_value
        mock_anthropic.assert_called_once_with(api_key="ak")
