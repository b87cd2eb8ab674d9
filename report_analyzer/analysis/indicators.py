from report_analyzer.analysis.models import VisualIndicators
from report_analyzer.analysis.rules import (
    CHART_PATTERN,
    MIN_NUMERIC_TOKENS,
    NUMERIC_DENSITY_THRESHOLD,
    NUMERIC_TOKEN_PATTERN,
    TIME_SERIES_PATTERN,
)


def detect_visual_indicators(text: str) -> VisualIndicators:
    """Look for chart, graph, table and time-series hints in *text*.

    Used on first-pass OCR output to decide whether an enhanced pass is worth
    running, and by the analyzer to populate ContentSignals.
    """
    chart_terms: list[str] = []
    for match in CHART_PATTERN.finditer(text):
        term = match.group(0).lower()
        if term not in chart_terms:
            chart_terms.append(term)

    tokens = text.split()
    numeric_tokens = sum(1 for token in tokens if NUMERIC_TOKEN_PATTERN.match(token))
    density = numeric_tokens / len(tokens) if tokens else 0.0
    dense_numbers = (
        numeric_tokens >= MIN_NUMERIC_TOKENS and density >= NUMERIC_DENSITY_THRESHOLD
    )

    return VisualIndicators(
        chart_terms=tuple(chart_terms),
        numeric_tokens=numeric_tokens,
        numeric_density=round(density, 4),
        has_time_series=TIME_SERIES_PATTERN.search(text) is not None,
        dense_numbers=dense_numbers,
    )
