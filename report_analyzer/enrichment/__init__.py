from report_analyzer.enrichment.enricher import AiEnricher, should_enrich
from report_analyzer.enrichment.factory import EnricherFactory
from report_analyzer.enrichment.models import EnrichedInsight, EnrichmentRequest

__all__ = [
    "AiEnricher",
    "EnrichedInsight",
    "EnricherFactory",
    "EnrichmentRequest",
    "should_enrich",
]
