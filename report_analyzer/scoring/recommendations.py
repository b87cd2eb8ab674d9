from report_analyzer.analysis.models import ContentSignals, MetricCategory, TrendDirection

MIN_RECOMMENDATIONS = 3
MAX_RECOMMENDATIONS = 5

DOMAIN_RECOMMENDATIONS: dict[str, str] = {
    "financial": (
        "Connect organic performance to revenue by reporting ROI per landing page."
    ),
    "marketing": (
        "Align landing page copy with campaign messaging to lift conversion rates."
    ),
    "search": (
        "Expand keyword targeting around terms ranking just outside the first page."
    ),
    "social": (
        "Promote top-performing content on social channels to earn links and mentions."
    ),
}

TREND_RECOMMENDATIONS: dict[TrendDirection, str] = {
    TrendDirection.NEGATIVE: (
        "Investigate the declining metrics first and prioritize fixes on affected pages."
    ),
    TrendDirection.MIXED: (
        "Compare the improving and declining metrics to isolate what changed between periods."
    ),
}

METRIC_RECOMMENDATIONS: dict[MetricCategory, str] = {
    MetricCategory.RANKING: (
        "Track ranking positions weekly and refresh content for slipping keywords."
    ),
    MetricCategory.TRAFFIC: (
        "Segment traffic by channel to see which sources bring qualified visits."
    ),
    MetricCategory.ENGAGEMENT_TIME: (
        "Review pages with short engagement time and strengthen their on-page content."
    ),
    MetricCategory.PERCENTAGE: (
        "Benchmark the reported percentage changes against the previous period."
    ),
}

GENERIC_RECOMMENDATIONS: tuple[str, ...] = (
    "Improve document structure with clear, descriptive headings.",
    "Optimize keyword usage for better search visibility.",
    "Add more descriptive metadata, including page titles and meta descriptions.",
    "Consider breaking long content into focused sections.",
)


def build_recommendations(signals: ContentSignals) -> tuple[str, ...]:
    """Prioritized, de-duplicated recommendations for *signals*.

    Order: one per detected domain, then a trend alert, then one per metric
    category. Generic advice tops the list up to the minimum; the result is
    capped at the maximum.
    """
    candidates: list[str] = [
        DOMAIN_RECOMMENDATIONS[domain] for domain in signals.domains.active()
    ]
    trend_advice = TREND_RECOMMENDATIONS.get(signals.trend)
    if trend_advice:
        candidates.append(trend_advice)
    candidates.extend(
        advice
        for category, advice in METRIC_RECOMMENDATIONS.items()
        if signals.metrics.get(category)
    )

    recommendations: list[str] = []
    for advice in candidates:
        if advice not in recommendations:
            recommendations.append(advice)

    for advice in GENERIC_RECOMMENDATIONS:
        if len(recommendations) >= MIN_RECOMMENDATIONS:
            break
        if advice not in recommendations:
            recommendations.append(advice)

    return tuple(recommendations[:MAX_RECOMMENDATIONS])
