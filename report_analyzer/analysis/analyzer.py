"""Heuristic content analyzer.

Processing flow:
1. Tokenize on whitespace, normalize, filter by length and stopwords.
2. Count keyword frequencies and keep the top entries.
3. Run every metric rule over the raw text, grouping matches per category.
4. Flag content domains from fixed vocabularies.
5. Infer trend direction around metric matches (or globally).
6. Collect visual indicators, structural counts and SEO dimension mentions.
7. Rebuild charts from the figures printed beside them (see charts.py).

The analyzer holds no state: the same text always yields equal signals.
"""

import re

from report_analyzer.analysis.charts import extract_chart_data
from report_analyzer.analysis.indicators import detect_visual_indicators
from report_analyzer.analysis.models import (
    ContentSignals,
    DomainFlags,
    ElementCounts,
    MetricCategory,
    TrendDirection,
)
from report_analyzer.analysis.rules import (
    DIMENSION_PATTERNS,
    DOMAIN_PATTERNS,
    IMAGE_PATTERN,
    LINK_PATTERN,
    MAX_MATCHES_PER_CATEGORY,
    META_PATTERN,
    METRIC_RULES,
    MIN_KEYWORD_LENGTH,
    NEGATIVE_PATTERN,
    POSITIVE_PATTERN,
    STOPWORDS,
    TOP_KEYWORDS,
    TREND_WINDOW,
)
from report_analyzer.analysis.structure import find_headings

_NON_WORD = re.compile(r"[^\w]")


class ContentAnalyzer:
    """Turns extracted text into ContentSignals."""

    def analyze(self, text: str, source_name: str | None = None) -> ContentSignals:
        """*source_name* is the report file name, a fallback source for the reporting period."""
        tokens = text.split()
        metrics, strength, spans = self._detect_metrics(text)
        return ContentSignals(
            word_count=len(tokens),
            keyword_stats=self._keyword_stats(tokens),
            metrics=metrics,
            metric_strength=strength,
            domains=self._detect_domains(text),
            trend=self._detect_trend(text, spans),
            visual=detect_visual_indicators(text),
            element_counts=self._count_elements(text),
            dimension_mentions={
                dimension: len(pattern.findall(text))
                for dimension, pattern in DIMENSION_PATTERNS.items()
            },
            charts=extract_chart_data(text, source_name),
        )

    # ------------------------------------------------------------------
    # Keywords
    # ------------------------------------------------------------------

    @staticmethod
    def _keyword_stats(tokens: list[str]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for token in tokens:
            word = _NON_WORD.sub("", token.lower())
            if len(word) < MIN_KEYWORD_LENGTH or word in STOPWORDS or word.isdigit():
                continue
            counts[word] = counts.get(word, 0) + 1
        # sorted() is stable, so equal counts keep first-occurrence order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return dict(ranked[:TOP_KEYWORDS])

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    @staticmethod
    def _detect_metrics(
        text: str,
    ) -> tuple[dict[MetricCategory, tuple[str, ...]], float, list[tuple[int, int]]]:
        """Apply every metric rule.

        Returns:
            (matches per category, summed rule weight, spans of all matches)
        """
        grouped: dict[MetricCategory, list[str]] = {}
        strength = 0.0
        spans: list[tuple[int, int]] = []
        for rule in METRIC_RULES:
            for match in rule.pattern.finditer(text):
                spans.append(match.span())
                value = " ".join(match.group(0).split())
                bucket = grouped.setdefault(rule.category, [])
                if value in bucket or len(bucket) >= MAX_MATCHES_PER_CATEGORY:
                    continue
                bucket.append(value)
                strength += rule.weight
        metrics = {category: tuple(values) for category, values in grouped.items()}
        return metrics, strength, spans

    # ------------------------------------------------------------------
    # Domains and trend
    # ------------------------------------------------------------------

    @staticmethod
    def _detect_domains(text: str) -> DomainFlags:
        return DomainFlags(**{
            domain: pattern.search(text) is not None
            for domain, pattern in DOMAIN_PATTERNS.items()
        })

    @staticmethod
    def _detect_trend(text: str, spans: list[tuple[int, int]]) -> TrendDirection:
        if spans:
            windows = _merge_windows(spans, len(text))
            positive = sum(
                len(POSITIVE_PATTERN.findall(text, start, end)) for start, end in windows
            )
            negative = sum(
                len(NEGATIVE_PATTERN.findall(text, start, end)) for start, end in windows
            )
        else:
            positive = len(POSITIVE_PATTERN.findall(text))
            negative = len(NEGATIVE_PATTERN.findall(text))

        if positive > negative:
            return TrendDirection.POSITIVE
        if negative > positive:
            return TrendDirection.NEGATIVE
        if positive:
            return TrendDirection.MIXED
        return TrendDirection.NEUTRAL

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @staticmethod
    def _count_elements(text: str) -> ElementCounts:
        return ElementCounts(
            meta=len(META_PATTERN.findall(text)),
            headings=len(find_headings(text.splitlines())),
            links=len(LINK_PATTERN.findall(text)),
            images=len(IMAGE_PATTERN.findall(text)),
        )


def _merge_windows(spans: list[tuple[int, int]], length: int) -> list[tuple[int, int]]:
    """Expand each span by the trend window and merge overlaps."""
    windows = sorted(
        (max(0, start - TREND_WINDOW), min(length, end + TREND_WINDOW))
        for start, end in spans
    )
    merged: list[tuple[int, int]] = []
    for start, end in windows:
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged
