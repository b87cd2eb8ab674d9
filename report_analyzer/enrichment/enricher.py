"""AI narrative enrichment for reports with sparse heuristic signals."""

import asyncio
import json
from pathlib import Path

from report_analyzer.analysis.charts import format_chart_insights
from report_analyzer.analysis.models import ContentSignals
from report_analyzer.enrichment.client_base import BaseEnrichmentClient
from report_analyzer.enrichment.exceptions import EnrichmentError
from report_analyzer.enrichment.models import EnrichedInsight, EnrichmentRequest
from report_analyzer.enrichment.prompt_loader import load_json_schema, load_prompt_template
from report_analyzer.logging.logger import Log
from report_analyzer.scoring.recommendations import MAX_RECOMMENDATIONS, build_recommendations

MIN_KEYWORDS_FOR_RICH_SIGNALS = 2
NO_CHARTS_NOTE = "No chart figures were detected."

HEURISTIC_NARRATIVE_TEMPLATE = (
    "This report contains few structured SEO signals, so this summary is based "
    "on heuristic analysis only.\n\nRecommended next steps:\n{steps}"
)


def build_heuristic_narrative(recommendations: tuple[str, ...]) -> str:
    steps = "\n".join(
        f"{index}. {advice}" for index, advice in enumerate(recommendations, start=1)
    )
    return HEURISTIC_NARRATIVE_TEMPLATE.format(steps=steps)


def should_enrich(signals: ContentSignals) -> bool:
    """True when the heuristics found too little to summarize on their own."""
    return (
        len(signals.keyword_stats) < MIN_KEYWORDS_FOR_RICH_SIGNALS
        or not signals.domains.active()
    )


class AiEnricher:
    """Asks an AI provider for a narrative; falls back to a canned one on any failure."""

    def __init__(
        self,
        *,
        client: BaseEnrichmentClient,
        model: str,
        temperature: float = 0.2,
        timeout_seconds: float = 30.0,
        max_input_chars: int = 12000,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._timeout_seconds = timeout_seconds
        self._max_input_chars = max_input_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def enrich(self, signals: ContentSignals, raw_text: str) -> EnrichedInsight:
        """Return an AI narrative for *signals*. Never raises."""
        fallback_recommendations: tuple[str, ...] = ()
        try:
            fallback_recommendations = build_recommendations(signals)
            prompt = self._build_prompt(signals, raw_text)
            Log.debug(f"Enrichment prompt:\n{prompt}")
            raw_response = await asyncio.wait_for(
                asyncio.to_thread(self._call_ai, prompt),
                timeout=self._timeout_seconds,
            )
            Log.debug(f"AI raw response:\n{raw_response}")
            insight = self._parse_insight(raw_response, fallback_recommendations)
        except asyncio.TimeoutError:
            Log.warning(
                "Enrichment timed out, using heuristic narrative",
                timeout_seconds=self._timeout_seconds,
            )
            return self._heuristic_insight(fallback_recommendations)
        except EnrichmentError as exc:
            Log.warning(f"Enrichment failed, using heuristic narrative: {exc}")
            return self._heuristic_insight(fallback_recommendations)
        except Exception as exc:
            Log.error(f"Unexpected enrichment error, using heuristic narrative: {exc}")
            return self._heuristic_insight(fallback_recommendations)

        Log.info(
            "Enrichment complete",
            model=self._model,
            recommendations=len(insight.recommendations),
        )
        return insight

    def _build_prompt(self, signals: ContentSignals, raw_text: str) -> str:
        return self._prompt_template.format(
            report_text=raw_text[: self._max_input_chars],
            signals_json=json.dumps(self._signals_payload(signals), indent=2),
            json_schema=self._json_schema,
            chart_insights=format_chart_insights(signals.charts) or NO_CHARTS_NOTE,
        )

    @staticmethod
    def _signals_payload(signals: ContentSignals) -> dict[str, object]:
        return {
            "word_count": signals.word_count,
            "keywords": signals.keyword_stats,
            "metrics": {
                category.value: list(matches) for category, matches in signals.metrics.items()
            },
            "domains": list(signals.domains.active()),
            "trend": signals.trend.value,
            "chart_terms": list(signals.visual.chart_terms),
            "numeric_density": signals.visual.numeric_density,
            "has_time_series": signals.has_time_series,
            "charts": signals.charts.to_dict(),
        }

    def _call_ai(self, prompt: str) -> str:
        return self._client.complete(
            EnrichmentRequest(
                model=self._model,
                user_prompt=prompt,
                json_schema=self._json_schema_dict,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
            )
        )

    @classmethod
    def _parse_insight(
        cls,
        raw: str,
        fallback_recommendations: tuple[str, ...],
    ) -> EnrichedInsight:
        parsed = cls._parse_json(raw)

        narrative = parsed.get("narrative")
        if not isinstance(narrative, str) or not narrative.strip():
            raise EnrichmentError("AI response has an empty narrative")

        raw_recommendations = parsed.get("recommendations")
        if not isinstance(raw_recommendations, list):
            raise EnrichmentError("AI response 'recommendations' must be a list")
        recommendations = tuple(
            item.strip() for item in raw_recommendations if isinstance(item, str) and item.strip()
        )

        return EnrichedInsight(
            narrative=narrative.strip(),
            is_ai_generated=True,
            recommendations=(recommendations or fallback_recommendations)[:MAX_RECOMMENDATIONS],
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise EnrichmentError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise EnrichmentError("JSON response must be an object")
        return parsed

    @staticmethod
    def _heuristic_insight(recommendations: tuple[str, ...]) -> EnrichedInsight:
        return EnrichedInsight(
            narrative=build_heuristic_narrative(recommendations),
            is_ai_generated=False,
            recommendations=recommendations,
        )
