from dataclasses import dataclass


@dataclass(frozen=True)
class EnrichedInsight:
    """Narrative produced by the enrichment step.

    ``is_ai_generated`` is False whenever the canned heuristic narrative was
    used instead of a provider response.
    """

    narrative: str
    is_ai_generated: bool
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class EnrichmentRequest:
    """One schema-constrained completion request sent to a provider."""

    model: str
    user_prompt: str
    json_schema: dict[str, object]
    temperature: float = 0.0
    system_prompt: str = ""
    schema_name: str = "enrichment_result"
