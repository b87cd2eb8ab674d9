from dataclasses import asdict, dataclass
from enum import Enum

from report_analyzer.analysis.models import ContentSignals
from report_analyzer.artifacts.models import ExtractionResult
from report_analyzer.enrichment.models import EnrichedInsight
from report_analyzer.scoring.models import AnalysisSummary


class PipelineStage(str, Enum):
    IDLE = "idle"
    CLASSIFYING = "classifying"
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    SCORING = "scoring"
    ENRICHING = "enriching"
    COMPLETE = "complete"
    FAILED = "failed"


STAGE_PERCENT: dict[PipelineStage, int] = {
    PipelineStage.IDLE: 0,
    PipelineStage.CLASSIFYING: 5,
    PipelineStage.EXTRACTING: 10,
    PipelineStage.ANALYZING: 70,
    PipelineStage.SCORING: 80,
    PipelineStage.ENRICHING: 90,
    PipelineStage.COMPLETE: 100,
}

# Extractor sub-progress (0..1) is mapped onto this percent range.
EXTRACTION_BAND: tuple[int, int] = (10, 60)


@dataclass(frozen=True)
class PipelineProgress:
    """Snapshot published on every stage transition."""

    stage: PipelineStage
    percent: int
    message: str
    run_id: int


@dataclass(frozen=True)
class PipelineResult:
    """Terminal value of a successful run."""

    run_id: int
    summary: AnalysisSummary
    extraction: ExtractionResult
    signals: ContentSignals
    insight: EnrichedInsight | None = None

    def to_dict(self) -> dict[str, object]:
        summary = self.summary
        signals = self.signals
        return {
            "run_id": self.run_id,
            "summary": {
                "score": summary.score,
                "ratings": {
                    dimension: rating.value for dimension, rating in summary.ratings.items()
                },
                "recommendations": list(summary.recommendations),
                "element_counts": asdict(summary.element_counts),
                "keyword_stats": dict(summary.keyword_stats),
                "keyword_density": summary.keyword_density,
                "word_count": summary.word_count,
                "trend": summary.trend.value,
            },
            "signals": {
                "metrics": {
                    category.value: list(matches) for category, matches in signals.metrics.items()
                },
                "metric_strength": signals.metric_strength,
                "domains": list(signals.domains.active()),
                "detected_chart_indicators": signals.detected_chart_indicators,
                "has_time_series": signals.has_time_series,
                "chart_terms": list(signals.visual.chart_terms),
                "numeric_density": signals.visual.numeric_density,
                "dimension_mentions": dict(signals.dimension_mentions),
                "charts": signals.charts.to_dict(),
            },
            "extraction": {
                "text": self.extraction.text,
                "page_count": self.extraction.page_count,
                "warnings": list(self.extraction.warnings),
                "is_synthetic": self.extraction.is_synthetic,
                "enhanced_ocr_applied": self.extraction.enhanced_ocr_applied,
                "headings": list(self.extraction.headings),
                "toc_entries": list(self.extraction.toc_entries),
            },
            "insight": None
            if self.insight is None
            else {
                "narrative": self.insight.narrative,
                "is_ai_generated": self.insight.is_ai_generated,
                "recommendations": list(self.insight.recommendations),
            },
        }
