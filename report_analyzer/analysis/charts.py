"""Chart reconstruction from report text.

Exported dashboards (Google Analytics, Search Console, agency templates) lose
their charts when flattened to text but keep the figures printed beside them.
This module gathers those figures into ChartData and renders it as a
markdown brief for the enrichment prompt.
"""

import re

from report_analyzer.analysis.models import (
    ChartData,
    ChartKind,
    ChartMetric,
    ChartSource,
    ExtractedChart,
    MetricTrend,
)
from report_analyzer.analysis.rules import (
    CHART_SECTIONS,
    FILE_NAME_RANGE_PATTERN,
    GOOGLE_ANALYTICS_MARKERS,
    GOOGLE_ANALYTICS_METRICS,
    MAX_MATCHES_PER_CATEGORY,
    NEGATIVE_PATTERN,
    POSITIVE_PATTERN,
    SEARCH_CONSOLE_MARKERS,
    SEARCH_CONSOLE_METRICS,
    SEARCH_CONSOLE_TRIO,
    SIGNED_CHANGE_PATTERN,
    TIMEFRAME_PATTERNS,
    TREND_WINDOW,
    ChartMetricRule,
)

GOOGLE_ANALYTICS_TITLE = "Google Analytics Organic Performance"
SEARCH_CONSOLE_TITLE = "Google Search Console Performance"

_TREND_ICONS = {
    MetricTrend.UP: "↑",
    MetricTrend.DOWN: "↓",
    MetricTrend.NEUTRAL: "→",
}

_COMMUNICATION_GUIDE = (
    "### Visualization Communication Guide\n"
    "When discussing these data visualizations with clients:\n\n"
    "- Focus on overall trends rather than individual data points\n"
    "- Highlight the relationship between different metrics "
    "(e.g., how higher rankings lead to more traffic)\n"
    "- Provide industry context to help clients understand how their metrics "
    "compare to expectations\n"
    "- Connect the performance data to business objectives and outcomes\n"
)


def extract_chart_data(text: str, source_name: str | None = None) -> ChartData:
    """Collect chart figures from *text*.

    Args:
        text: Extracted report text.
        source_name: File name of the report. Used only when the text names
            no reporting period.
    """
    timeframe = detect_timeframe(text)
    charts: list[ExtractedChart] = []

    google_analytics = GOOGLE_ANALYTICS_MARKERS.search(text) is not None
    if google_analytics:
        chart = _named_chart(
            text,
            GOOGLE_ANALYTICS_METRICS,
            ChartSource.GOOGLE_ANALYTICS,
            GOOGLE_ANALYTICS_TITLE,
            timeframe,
        )
        if chart is not None:
            charts.append(chart)

    search_console = SEARCH_CONSOLE_MARKERS.search(text) is not None or all(
        pattern.search(text) for pattern in SEARCH_CONSOLE_TRIO
    )
    if search_console:
        chart = _named_chart(
            text,
            SEARCH_CONSOLE_METRICS,
            ChartSource.SEARCH_CONSOLE,
            SEARCH_CONSOLE_TITLE,
            timeframe,
        )
        if chart is not None:
            charts.append(chart)

    for name, pattern in CHART_SECTIONS.items():
        metrics = tuple(
            ChartMetric(name=name, value=match.group(1), trend=_trend_near(text, match))
            for match in pattern.finditer(text)
        )[:MAX_MATCHES_PER_CATEGORY]
        if metrics:
            charts.append(ExtractedChart(
                source=ChartSource.SECTION,
                kind=ChartKind.UNKNOWN,
                title=f"{name.title()} Metrics",
                metrics=metrics,
            ))

    if not timeframe and source_name:
        timeframe = timeframe_from_file_name(source_name)

    return ChartData(
        charts=tuple(charts),
        google_analytics=google_analytics,
        search_console=search_console,
        timeframe=timeframe,
    )


def detect_timeframe(text: str) -> str:
    """Return the first reporting period named in *text*, or ""."""
    for pattern in TIMEFRAME_PATTERNS:
        match = pattern.search(text)
        if match:
            return " ".join(match.group(0).split())
    return ""


def timeframe_from_file_name(name: str) -> str:
    """``seo_2025-03-01_2025-03-31.pdf`` -> ``2025-03-01 to 2025-03-31``."""
    match = FILE_NAME_RANGE_PATTERN.search(name)
    if match is None:
        return ""
    return f"{match.group(1)} to {match.group(2)}"


def format_chart_insights(data: ChartData) -> str:
    """Render *data* as a markdown brief. Empty when nothing was found."""
    if data.is_empty:
        return ""

    parts = ["## Data Visualization Analysis\n"]
    if data.timeframe:
        parts.append(f"This analysis covers the period: {data.timeframe}\n")

    if data.google_analytics:
        parts.append(_tool_section(
            "Google Analytics Performance",
            data.chart_from(ChartSource.GOOGLE_ANALYTICS),
            "The document contains Google Analytics data visualizations showing "
            "website traffic and user behavior metrics.",
        ))
    if data.search_console:
        parts.append(_tool_section(
            "Search Console Performance",
            data.chart_from(ChartSource.SEARCH_CONSOLE),
            "The document contains Search Console data visualizations showing "
            "search visibility and performance metrics.",
        ))

    sections = data.section_charts
    if sections:
        lines = [
            "### Additional Performance Visualizations",
            f"The document contains {len(sections)} additional data visualizations:",
        ]
        for chart in sections:
            lines.append(f"\n#### {chart.title}")
            lines.extend(
                f"- {metric.name}: {metric.value} {_TREND_ICONS[metric.trend]}"
                for metric in chart.metrics
            )
        parts.append("\n".join(lines) + "\n")

    parts.append(_COMMUNICATION_GUIDE)
    return "\n".join(parts)


def _named_chart(
    text: str,
    rules: tuple[ChartMetricRule, ...],
    source: ChartSource,
    title: str,
    timeframe: str,
) -> ExtractedChart | None:
    metrics: list[ChartMetric] = []
    for rule in rules:
        match = rule.pattern.search(text)
        if match is None:
            continue
        trend = _trend_near(text, match)
        metrics.append(ChartMetric(
            name=rule.name,
            value=match.group(1) + rule.suffix,
            trend=trend.inverted() if rule.lower_is_better else trend,
        ))
    if not metrics:
        return None
    return ExtractedChart(
        source=source,
        kind=ChartKind.LINE,
        title=title,
        metrics=tuple(metrics),
        timeframe=timeframe,
    )


def _trend_near(text: str, match: re.Match[str]) -> MetricTrend:
    """Trend of the figure in *match*, read from the rest of its line.

    A signed change printed after the figure wins over one printed before it.
    Without either, trend words around and inside the match are counted.
    """
    line_start = text.rfind("\n", 0, match.start()) + 1
    line_end = text.find("\n", match.end())
    if line_end == -1:
        line_end = len(text)
    before = text[max(line_start, match.start() - TREND_WINDOW): match.start()]
    after = text[match.end(): min(line_end, match.end() + TREND_WINDOW)]

    for fragment in (after, before):
        change = SIGNED_CHANGE_PATTERN.search(fragment)
        if change:
            return MetricTrend.UP if change.group(1) == "+" else MetricTrend.DOWN

    context = f"{before} {match.group(0)} {after}"
    positive = len(POSITIVE_PATTERN.findall(context))
    negative = len(NEGATIVE_PATTERN.findall(context))
    if positive > negative:
        return MetricTrend.UP
    if negative > positive:
        return MetricTrend.DOWN
    return MetricTrend.NEUTRAL


def _tool_section(heading: str, chart: ExtractedChart | None, fallback: str) -> str:
    lines = [f"### {heading}"]
    if chart is None:
        lines.append(fallback)
    else:
        lines.append("Key metrics detected:")
        lines.extend(
            f"- **{metric.name}**: {metric.value} {_TREND_ICONS[metric.trend]}"
            for metric in chart.metrics
        )
    return "\n".join(lines) + "\n"
