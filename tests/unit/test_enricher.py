"""Tests for AiEnricher."""

import json
import time
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from report_analyzer.analysis.charts import extract_chart_data
from report_analyzer.analysis.models import ContentSignals, DomainFlags
from report_analyzer.enrichment.enricher import (
    NO_CHARTS_NOTE,
    AiEnricher,
    build_heuristic_narrative,
    should_enrich,
)
from report_analyzer.enrichment.exceptions import EnrichmentNetworkError
from report_analyzer.scoring.recommendations import build_recommendations


def _sparse_signals() -> ContentSignals:
    return ContentSignals(word_count=12, keyword_stats={"report": 2})


def _make_enricher(client: MagicMock, **kwargs: object) -> AiEnricher:
    return AiEnricher(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _valid_response(
    narrative: str = "Traffic is flat.",
    recommendations: list[str] | None = None,
) -> str:
    return json.dumps({
        "narrative": narrative,
        "recommendations": recommendations if recommendations is not None else ["Do X."],
    })


class TestShouldEnrich:
    def test_sparse_keywords_trigger_enrichment(self) -> None:
        signals = ContentSignals(
            word_count=5,
            keyword_stats={"ranking": 1},
            domains=DomainFlags(search=True),
        )
        assert should_enrich(signals) is True

    def test_missing_domains_trigger_enrichment(self) -> None:
        signals = ContentSignals(word_count=5, keyword_stats={"alpha": 2, "beta": 1})
        assert should_enrich(signals) is True

    def test_rich_signals_skip_enrichment(self) -> None:
        signals = ContentSignals(
            word_count=50,
            keyword_stats={"ranking": 3, "traffic": 2},
            domains=DomainFlags(search=True),
        )
        assert should_enrich(signals) is False


class TestEnrichSuccess:
    @pytest.mark.asyncio
    async def test_returns_ai_generated_insight(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        insight = await _make_enricher(client).enrich(_sparse_signals(), "raw text")
        assert insight.is_ai_generated is True
        assert insight.narrative == "Traffic is flat."
        assert insight.recommendations == ("Do X.",)

    @pytest.mark.asyncio
    async def test_prompt_contains_text_and_signals(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        await _make_enricher(client).enrich(_sparse_signals(), "quarterly organic report")
        prompt = client.complete.call_args.args[0].user_prompt
        assert "quarterly organic report" in prompt
        assert '"word_count": 12' in prompt

    @pytest.mark.asyncio
    async def test_prompt_contains_chart_figures(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        signals = ContentSignals(
            word_count=12,
            charts=extract_chart_data("Google Analytics\nSessions: 12,400 (+8%)"),
        )
        await _make_enricher(client).enrich(signals, "text")
        prompt = client.complete.call_args.args[0].user_prompt
        assert "- **Sessions**: 12,400 ↑" in prompt
        assert '"google_analytics": true' in prompt

    @pytest.mark.asyncio
    async def test_prompt_notes_missing_chart_figures(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        await _make_enricher(client).enrich(_sparse_signals(), "text")
        prompt = client.complete.call_args.args[0].user_prompt
        assert NO_CHARTS_NOTE in prompt

    @pytest.mark.asyncio
    async def test_truncates_input_text(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        enricher = _make_enricher(client, max_input_chars=10)
        await enricher.enrich(_sparse_signals(), "0123456789ABCDEF")
        prompt = client.complete.call_args.args[0].user_prompt
        assert "0123456789" in prompt
        assert "ABCDEF" not in prompt

    @pytest.mark.asyncio
    async def test_passes_schema_and_model(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response()
        await _make_enricher(client).enrich(_sparse_signals(), "text")
        request = client.complete.call_args.args[0]
        assert request.model == "test-model"
        assert "narrative" in request.json_schema["properties"]

    @pytest.mark.asyncio
    async def test_strips_markdown_code_fences(self) -> None:
        client = MagicMock()
        client.complete.return_value = "```json\n" + _valid_response() + "\n```"
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert insight.is_ai_generated is True

    @pytest.mark.asyncio
    async def test_empty_ai_recommendations_use_heuristic_list(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response(recommendations=[])
        signals = _sparse_signals()
        insight = await _make_enricher(client).enrich(signals, "text")
        assert insight.is_ai_generated is True
        assert insight.recommendations == build_recommendations(signals)

    @pytest.mark.asyncio
    async def test_caps_ai_recommendations_at_five(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response(
            recommendations=[f"Step {i}" for i in range(8)]
        )
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert len(insight.recommendations) == 5


class TestEnrichFallback:
    @pytest.mark.asyncio
    async def test_timeout_returns_canned_narrative(self) -> None:
        client = MagicMock()
        client.complete.side_effect = lambda _request: time.sleep(0.5) or "{}"
        signals = _sparse_signals()
        enricher = _make_enricher(client, timeout_seconds=0.05)
        insight = await enricher.enrich(signals, "text")
        assert insight.is_ai_generated is False
        assert insight.narrative == build_heuristic_narrative(build_recommendations(signals))

    @pytest.mark.asyncio
    async def test_network_error_returns_canned_narrative(self) -> None:
        client = MagicMock()
        client.complete.side_effect = EnrichmentNetworkError("down")
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert insight.is_ai_generated is False

    @pytest.mark.asyncio
    async def test_invalid_json_returns_canned_narrative(self) -> None:
        client = MagicMock()
        client.complete.return_value = "not json"
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert insight.is_ai_generated is False

    @pytest.mark.asyncio
    async def test_empty_narrative_returns_canned_narrative(self) -> None:
        client = MagicMock()
        client.complete.return_value = _valid_response(narrative="  ")
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert insight.is_ai_generated is False

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_canned_narrative(self) -> None:
        client = MagicMock()
        client.complete.side_effect = RuntimeError("boom")
        insight = await _make_enricher(client).enrich(_sparse_signals(), "text")
        assert insight.is_ai_generated is False
        assert insight.recommendations == build_recommendations(_sparse_signals())

    @pytest.mark.asyncio
    async def test_unknown_template_placeholder_returns_canned_narrative(
        self, tmp_path: Path
    ) -> None:
        template = tmp_path / "prompt.txt"
        template.write_text("{report_text}\n{unknown}\n", encoding="utf-8")
        client = MagicMock()
        enricher = _make_enricher(client, prompt_template_path=template)

        insight = await enricher.enrich(_sparse_signals(), "text")

        assert insight.is_ai_generated is False
        assert insight.recommendations == build_recommendations(_sparse_signals())
        client.complete.assert_not_called()


class TestHeuristicNarrative:
    def test_numbers_each_recommendation(self) -> None:
        narrative = build_heuristic_narrative(("First.", "Second."))
        assert "1. First." in narrative
        assert "2. Second." in narrative
