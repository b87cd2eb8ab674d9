from dataclasses import dataclass, field
from enum import Enum

from report_analyzer.analysis.models import ElementCounts, TrendDirection


class Rating(str, Enum):
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    MISSING = "Missing"


@dataclass(frozen=True)
class AnalysisSummary:
    """Externally visible result of the scoring stage."""

    score: int
    element_counts: ElementCounts
    ratings: dict[str, Rating]
    recommendations: tuple[str, ...]
    keyword_stats: dict[str, int] = field(default_factory=dict)
    keyword_density: float = 0.0
    word_count: int = 0
    trend: TrendDirection = TrendDirection.NEUTRAL
