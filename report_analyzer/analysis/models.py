from dataclasses import dataclass, field
from enum import Enum


class MetricCategory(str, Enum):
    PERCENTAGE = "percentage"
    RANKING = "ranking"
    TRAFFIC = "traffic"
    ENGAGEMENT_TIME = "engagement_time"


class TrendDirection(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MIXED = "mixed"
    NEUTRAL = "neutral"


class MetricTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"

    def inverted(self) -> "MetricTrend":
        """Swap up and down for metrics where a lower value is better."""
        if self is MetricTrend.UP:
            return MetricTrend.DOWN
        if self is MetricTrend.DOWN:
            return MetricTrend.UP
        return self


class ChartKind(str, Enum):
    LINE = "line"
    UNKNOWN = "unknown"


class ChartSource(str, Enum):
    GOOGLE_ANALYTICS = "google_analytics"
    SEARCH_CONSOLE = "search_console"
    SECTION = "section"


@dataclass(frozen=True)
class DomainFlags:
    """Content domains detected in the text. Any subset may be set."""

    financial: bool = False
    marketing: bool = False
    search: bool = False
    social: bool = False

    def active(self) -> tuple[str, ...]:
        """Names of the set flags, in declaration order."""
        return tuple(
            name
            for name in ("financial", "marketing", "search", "social")
            if getattr(self, name)
        )


@dataclass(frozen=True)
class VisualIndicators:
    """Hints that the text was read from a chart, graph or table."""

    chart_terms: tuple[str, ...] = ()
    numeric_tokens: int = 0
    numeric_density: float = 0.0
    has_time_series: bool = False
    dense_numbers: bool = False

    @property
    def has_chart_content(self) -> bool:
        return bool(self.chart_terms) or self.dense_numbers

    @property
    def any(self) -> bool:
        return self.has_chart_content or self.has_time_series


@dataclass(frozen=True)
class ElementCounts:
    meta: int = 0
    headings: int = 0
    links: int = 0
    images: int = 0

    @property
    def total(self) -> int:
        return self.meta + self.headings + self.links + self.images


@dataclass(frozen=True)
class ChartMetric:
    name: str
    value: str
    trend: MetricTrend = MetricTrend.NEUTRAL


@dataclass(frozen=True)
class ExtractedChart:
    """A chart reconstructed from the figures printed around it."""

    source: ChartSource
    kind: ChartKind
    title: str
    metrics: tuple[ChartMetric, ...] = ()
    timeframe: str = ""


@dataclass(frozen=True)
class ChartData:
    """Charts found in a report, plus the Google tooling it was exported from.

    ``google_analytics`` and ``search_console`` may be set without a matching
    chart when the report names the tool but prints no recognizable figures.
    """

    charts: tuple[ExtractedChart, ...] = ()
    google_analytics: bool = False
    search_console: bool = False
    timeframe: str = ""

    def chart_from(self, source: ChartSource) -> ExtractedChart | None:
        return next((chart for chart in self.charts if chart.source is source), None)

    @property
    def section_charts(self) -> tuple[ExtractedChart, ...]:
        return tuple(chart for chart in self.charts if chart.source is ChartSource.SECTION)

    @property
    def is_empty(self) -> bool:
        return not (self.charts or self.google_analytics or self.search_console)

    def to_dict(self) -> dict[str, object]:
        return {
            "google_analytics": self.google_analytics,
            "search_console": self.search_console,
            "timeframe": self.timeframe,
            "charts": [
                {
                    "source": chart.source.value,
                    "kind": chart.kind.value,
                    "title": chart.title,
                    "timeframe": chart.timeframe,
                    "metrics": [
                        {"name": metric.name, "value": metric.value, "trend": metric.trend.value}
                        for metric in chart.metrics
                    ],
                }
                for chart in self.charts
            ],
        }


@dataclass(frozen=True)
class ContentSignals:
    """Read-only heuristic features derived from extracted text."""

    word_count: int
    keyword_stats: dict[str, int] = field(default_factory=dict)
    metrics: dict[MetricCategory, tuple[str, ...]] = field(default_factory=dict)
    metric_strength: float = 0.0
    domains: DomainFlags = field(default_factory=DomainFlags)
    trend: TrendDirection = TrendDirection.NEUTRAL
    visual: VisualIndicators = field(default_factory=VisualIndicators)
    element_counts: ElementCounts = field(default_factory=ElementCounts)
    dimension_mentions: dict[str, int] = field(default_factory=dict)
    charts: ChartData = field(default_factory=ChartData)

    @property
    def detected_chart_indicators(self) -> bool:
        return self.visual.has_chart_content

    @property
    def has_time_series(self) -> bool:
        return self.visual.has_time_series

    @property
    def metric_match_count(self) -> int:
        return sum(len(matches) for matches in self.metrics.values())
