"""Tests for EnricherFactory."""

from unittest.mock import patch

import pytest

from report_analyzer.config.settings import Settings
from report_analyzer.enrichment.enricher import AiEnricher
from report_analyzer.enrichment.factory import EnricherFactory


class TestEnricherFactory:
    def test_returns_none_when_disabled(self) -> None:
        settings = Settings(enrichment_provider="disabled")
        assert EnricherFactory.create(settings) is None

    def test_creates_example_enricher(self) -> None:
        settings = Settings(enrichment_provider="example")
        enricher = EnricherFactory.create(settings)
        assert isinstance(enricher, AiEnricher)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            enrichment_provider="openai",
            enrichment_openai_api_key="openai-key",
            enrichment_openai_model_name="gpt-4o",
            enrichment_openai_timeout_seconds=42,
        )
        with patch("report_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            enricher = EnricherFactory.create(settings)
        assert isinstance(enricher, AiEnricher)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_is_case_insensitive(self) -> None:
        settings = Settings(enrichment_provider="OpenAI", enrichment_openai_api_key="k")
        with patch("report_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_uses_provider_default_base_url_for_groq(self) -> None:
        settings = Settings(
            enrichment_provider="groq",
            enrichment_groq_api_key="k",
            enrichment_groq_model_name="llama",
        )
        with patch("report_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://api.groq.com/openai/v1",
        )

    def test_ollama_uses_longer_default_timeout(self) -> None:
        settings = Settings(enrichment_provider="ollama", enrichment_ollama_model_name="llama3")
        with patch("report_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="ollama",
            timeout_seconds=60,
            base_url="http://localhost:11434/v1",
        )

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            enrichment_provider="openai_compatible",
            enrichment_openai_compatible_api_key="k",
            enrichment_openai_compatible_model_name="m",
            enrichment_openai_compatible_base_url="https://llm.internal.test/v1",
        )
        with patch("report_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://llm.internal.test/v1",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(enrichment_provider="openai_compatible")
        with pytest.raises(ValueError, match="base_url is required"):
            EnricherFactory.create(settings)

    def test_raises_for_unknown_provider(self) -> None:
        settings = Settings(enrichment_provider="unknown")
        with pytest.raises(ValueError, match="Unknown enrichment provider"):
            EnricherFactory.create(settings)
