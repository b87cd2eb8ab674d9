"""Declarative rule tables for the heuristic content analyzer.

The analyzer and the OCR extractor only iterate these tables.
"""

import re
from dataclasses import dataclass

from report_analyzer.analysis.models import MetricCategory


@dataclass(frozen=True)
class MetricRule:
    category: MetricCategory
    pattern: re.Pattern[str]
    weight: float


METRIC_RULES: tuple[MetricRule, ...] = (
    MetricRule(
        MetricCategory.PERCENTAGE,
        re.compile(r"[+-]?\d+(?:[.,]\d+)?\s?%"),
        1.0,
    ),
    MetricRule(
        MetricCategory.RANKING,
        re.compile(
            r"\b(?:rank(?:ed|ings?|s)?|position)\s*(?::|#|of|at)?\s*#?\s*\d+\b",
            re.IGNORECASE,
        ),
        1.5,
    ),
    MetricRule(
        MetricCategory.TRAFFIC,
        re.compile(
            r"\b(?:traffic|sessions?|visits?|visitors?|users?|pageviews?)\s*:\s*\d[\d,]*",
            re.IGNORECASE,
        ),
        1.5,
    ),
    MetricRule(
        MetricCategory.ENGAGEMENT_TIME,
        re.compile(r"\b\d{1,2}:\d{2}:\d{2}\b"),
        1.0,
    ),
)

MAX_MATCHES_PER_CATEGORY = 6

MIN_KEYWORD_LENGTH = 4
TOP_KEYWORDS = 8

STOPWORDS: frozenset[str] = frozenset({
    "about", "above", "after", "again", "against", "also", "been", "before",
    "being", "below", "between", "both", "could", "does", "doing", "down",
    "during", "each", "from", "further", "have", "having", "here", "into",
    "just", "more", "most", "much", "must", "only", "other", "ours", "over",
    "same", "should", "some", "such", "than", "that", "their", "theirs",
    "them", "then", "there", "these", "they", "this", "those", "through",
    "under", "until", "upon", "very", "were", "what", "when", "where",
    "which", "while", "will", "with", "within", "would", "your", "yours",
    "page", "pages",
})

DOMAIN_VOCABULARIES: dict[str, tuple[str, ...]] = {
    "financial": (
        "revenue", "profit", "roi", "cost", "budget", "sales", "income",
        "margin", "spend", "earnings", "price",
    ),
    "marketing": (
        "conversion", "campaign", "audience", "brand", "engagement", "leads",
        "funnel", "ctr", "landing", "promotion",
    ),
    "search": (
        "ranking", "keyword", "serp", "seo", "organic", "impression",
        "backlink", "search", "crawl", "index",
    ),
    "social": (
        "facebook", "twitter", "instagram", "linkedin", "tiktok", "youtube",
        "follower", "retweet", "hashtag", "social",
    ),
}


def _vocabulary_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})(?:s|es|ed|ing)?\b", re.IGNORECASE)


DOMAIN_PATTERNS: dict[str, re.Pattern[str]] = {
    domain: _vocabulary_pattern(words) for domain, words in DOMAIN_VOCABULARIES.items()
}

POSITIVE_PATTERN = re.compile(
    r"\b(?:increase[sd]?|increasing|growth|grew|grow(?:s|ing)?|improved?|improvement"
    r"|improving|higher|gain(?:s|ed)?|rise|rising|rose|better|success|up)\b",
    re.IGNORECASE,
)
NEGATIVE_PATTERN = re.compile(
    r"\b(?:decrease[sd]?|decreasing|decline[sd]?|declining|drop(?:s|ped)?|lower"
    r"|reduced|worse|loss(?:es)?|fell|fall(?:ing)?|down)\b",
    re.IGNORECASE,
)
TREND_WINDOW = 60

CHART_VOCABULARY: tuple[str, ...] = (
    "chart", "graph", "axis", "trend", "distribution", "table", "legend",
    "plot", "histogram", "diagram",
)
CHART_PATTERN = _vocabulary_pattern(CHART_VOCABULARY)

_MONTHS = (
    r"january|february|march|april|may|june|july|august|september|october"
    r"|november|december|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec"
)
TIME_SERIES_PATTERN = re.compile(
    rf"\b(?:{_MONTHS})\.?,?\s+\d{{1,4}}\b|\b\d{{1,2}}\s+(?:{_MONTHS})\b",
    re.IGNORECASE,
)

_MONTH = rf"\b(?:{_MONTHS})\b\.?"
_DAY_YEAR = r"\s+\d{1,2}(?:\s*,\s*|\s+)\d{4}\b"
_RANGE_JOIN = r"\s*(?:to|through|-|–)\s*"

# First match wins, so wider ranges come before a bare month.
TIMEFRAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"{_MONTH}{_DAY_YEAR}{_RANGE_JOIN}{_MONTH}{_DAY_YEAR}", re.IGNORECASE),
    re.compile(rf"\b\d{{4}}-\d{{2}}-\d{{2}}{_RANGE_JOIN}\d{{4}}-\d{{2}}-\d{{2}}\b"),
    re.compile(
        rf"{_MONTH}\s+\d{{1,2}}{_RANGE_JOIN}{_MONTH}{_DAY_YEAR}", re.IGNORECASE
    ),
    re.compile(rf"{_MONTH}\s+\d{{4}}\b", re.IGNORECASE),
)
FILE_NAME_RANGE_PATTERN = re.compile(
    r"(\d{4}-\d{2}(?:-\d{2})?)[\s_-]+(\d{4}-\d{2}(?:-\d{2})?)"
)

GOOGLE_ANALYTICS_MARKERS = re.compile(
    r"google\s+analytics|analytics\s+performance|organic\s+performance", re.IGNORECASE
)
SEARCH_CONSOLE_MARKERS = re.compile(r"search\s+console|\bGSC\b")
SEARCH_CONSOLE_TRIO: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{word}s?\b", re.IGNORECASE)
    for word in ("impression", "click", "position")
)

_COUNT = r"(\d(?:[\d,]*\d)?)"
_DECIMAL = r"(\d(?:[\d,.]*\d)?)"


@dataclass(frozen=True)
class ChartMetricRule:
    """A named figure; group 1 of ``pattern`` is the value."""

    name: str
    pattern: re.Pattern[str]
    suffix: str = ""
    lower_is_better: bool = False


GOOGLE_ANALYTICS_METRICS: tuple[ChartMetricRule, ...] = (
    ChartMetricRule("Sessions", re.compile(rf"\bsessions?[:\s]+{_COUNT}", re.IGNORECASE)),
    ChartMetricRule("Users", re.compile(rf"\busers?[:\s]+{_COUNT}", re.IGNORECASE)),
    ChartMetricRule("Pageviews", re.compile(rf"\bpageviews?[:\s]+{_COUNT}", re.IGNORECASE)),
    ChartMetricRule(
        "Bounce Rate",
        re.compile(rf"\bbounce\s+rate[:\s]+{_DECIMAL}\s?%", re.IGNORECASE),
        suffix="%",
        lower_is_better=True,
    ),
    ChartMetricRule(
        "Avg. Session Duration",
        re.compile(
            r"\b(?:avg\.?|average)\s+(?:session|engagement)\s+(?:time|duration)"
            r"[:\s]+(\d(?:[\d:,.]*\d)?)",
            re.IGNORECASE,
        ),
    ),
)

SEARCH_CONSOLE_METRICS: tuple[ChartMetricRule, ...] = (
    ChartMetricRule(
        "Impressions", re.compile(rf"\bimpressions?[:\s]+{_COUNT}", re.IGNORECASE)
    ),
    ChartMetricRule("Clicks", re.compile(rf"\bclicks?[:\s]+{_COUNT}", re.IGNORECASE)),
    ChartMetricRule(
        "CTR", re.compile(rf"\bctr[:\s]+{_DECIMAL}\s?%", re.IGNORECASE), suffix="%"
    ),
    ChartMetricRule(
        "Position",
        re.compile(rf"\bposition[:\s]+{_DECIMAL}", re.IGNORECASE),
        lower_is_better=True,
    ),
)

# Report sections that usually sit next to a chart: name -> heading pattern.
CHART_SECTIONS: dict[str, re.Pattern[str]] = {
    name: re.compile(rf"\b(?:{pattern})\b[^\n\d]{{0,50}}{_DECIMAL}", re.IGNORECASE)
    for name, pattern in (
        ("keyword", r"keywords?"),
        ("organic traffic", r"organic\s+traffic"),
        ("page impressions", r"page\s+impressions"),
        ("conversion", r"conversions?"),
        ("revenue", r"revenue"),
        ("bounce rate", r"bounce\s+rate"),
        ("engagement", r"engagement"),
        ("ranking", r"rankings?"),
    )
}

SIGNED_CHANGE_PATTERN = re.compile(r"(?<![\w.])([+-])\d+(?:[.,]\d+)?\s?%")

NUMERIC_TOKEN_PATTERN =re.compile(r"^[(+\-$€£]*\d[\d,.:]*%?[),.;:]*$")
NUMERIC_DENSITY_THRESHOLD = 0.15
MIN_NUMERIC_TOKENS = 3

LINK_PATTERN = re.compile(r"\bhttps?://\S+|\bwww\.\S+", re.IGNORECASE)
IMAGE_PATTERN = re.compile(
    r"\b(?:images?|figures?|screenshots?|photos?|graphics?)\b", re.IGNORECASE
)
META_PATTERN = re.compile(
    r"\b(?:meta\s+(?:descriptions?|tags?|titles?|keywords?)|title\s+tags?)\b",
    re.IGNORECASE,
)

DIMENSION_PATTERNS: dict[str, re.Pattern[str]] = {
    "title": re.compile(
        r"\b(?:title\s+tags?|page\s+titles?|meta\s+titles?|titles?)\b", re.IGNORECASE
    ),
    "headings": re.compile(
        r"\b(?:h[1-6](?:\s+tags?)?|headings?|subheadings?)\b", re.IGNORECASE
    ),
    "canonical": re.compile(r"\bcanonical(?:s|ization|ized)?\b", re.IGNORECASE),
    "robots": re.compile(
        r"\b(?:robots(?:\.txt)?|noindex|nofollow)\b", re.IGNORECASE
    ),
    "alt_text": re.compile(
        r"\b(?:alt[\s-]?text|alt\s+attributes?|alt\s+tags?)\b", re.IGNORECASE
    ),
}
