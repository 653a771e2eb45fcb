"""Tests for generate_debriefings.compare_providers module."""

from unittest.mock import patch

import pytest

from fetch_articles.models import ArticleContent
from generate_debriefings.compare_providers import compare_providers
from generate_debriefings.models import Debriefing
from generate_debriefings.providers import MissingProviderError

ARTICLE = ArticleContent(url="https://example.com", title="T", content="C")


class TestCompareProviders:
    @patch("generate_debriefings.compare_providers.generate_debriefing")
    def test_queries_every_configured_provider(self, mock_generate, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "ak")
        mock_generate.side_effect = [
            Debriefing(url="https://example.com", title="T", summary="From OpenAI"),
            None,
        ]

        results = compare_providers(ARTICLE)

        assert list(results) == ["OpenAI", "Claude"]
        assert results["OpenAI"].summary == "From OpenAI"
        assert results["Claude"] is None
        providers = [call.args[1] for call in mock_generate.call_args_list]
        assert [p.name for p in providers] == ["openai", "anthropic"]
        assert all(p.max_tokens == 300 for p in providers)

    @patch("generate_debriefings.compare_providers.generate_debriefing")
    def test_single_provider(self, mock_generate, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("ANTHROPIC_API_KEY", "ak")
        mock_generate.return_value = Debriefing(url="u", title="T", summary="S")

        results = compare_providers(ARTICLE, max_tokens=100)

        assert list(results) == ["Claude"]
        assert mock_generate.call_args.args[1].max_tokens == 100

    def test_raises_without_credentials(self, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(MissingProviderError):
            compare_providers(ARTICLE)
