from report_analyzer.analysis.models import ContentSignals
from report_analyzer.scoring.models import AnalysisSummary, Rating
from report_analyzer.scoring.recommendations import build_recommendations

BASELINE_SCORE = 75
MIN_SCORE = 50
MAX_SCORE = 95

RATED_DIMENSIONS: tuple[str, ...] = ("title", "headings", "canonical", "robots", "alt_text")


class ScoringEngine:
    """Weighted-rule scoring over ContentSignals.

    The score is clamped to [50, 95]. Every input comes from *signals*;
    ``raw_text`` is not read.
    """

    def score(self, signals: ContentSignals, raw_text: str) -> AnalysisSummary:
        return AnalysisSummary(
            score=self._compute_score(signals),
            element_counts=signals.element_counts,
            ratings=self._rate_dimensions(signals),
            recommendations=build_recommendations(signals),
            keyword_stats=dict(signals.keyword_stats),
            keyword_density=self._keyword_density(signals),
            word_count=signals.word_count,
            trend=signals.trend,
        )

    @staticmethod
    def _compute_score(signals: ContentSignals) -> int:
        score = BASELINE_SCORE

        words = signals.word_count
        if words < 100:
            score -= 10
        elif words < 300:
            score -= 5
        elif words > 1000:
            score += 5
            if words > 3000:
                score += 3

        strength = signals.metric_strength
        if strength >= 5:
            score += 5
        elif strength >= 1:
            score += 2
        else:
            score -= 5

        if signals.detected_chart_indicators:
            score += 3
        if signals.has_time_series:
            score += 2

        elements = signals.element_counts.total
        if elements >= 10:
            score += 5
        elif elements >= 3:
            score += 2
        elif elements == 0:
            score -= 5

        if len(signals.keyword_stats) < 2:
            score -= 5
        if len(signals.domains.active()) >= 2:
            score += 2

        return max(MIN_SCORE, min(MAX_SCORE, score))

    @staticmethod
    def _rate_dimensions(signals: ContentSignals) -> dict[str, Rating]:
        ratings: dict[str, Rating] = {}
        for dimension in RATED_DIMENSIONS:
            value = signals.dimension_mentions.get(dimension, 0)
            if dimension == "headings":
                value += signals.element_counts.headings
            ratings[dimension] = _bucket(value)
        return ratings

    @staticmethod
    def _keyword_density(signals: ContentSignals) -> float:
        if signals.word_count == 0:
            return 0.0
        keyword_total = sum(signals.keyword_stats.values())
        return round(keyword_total / signals.word_count * 100, 2)


def _bucket(value: int) -> Rating:
    if value <= 0:
        return Rating.MISSING
    if value == 1:
        return Rating.POOR
    if value <= 3:
        return Rating.FAIR
    return Rating.GOOD
