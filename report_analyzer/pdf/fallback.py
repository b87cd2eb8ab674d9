"""Metadata-only summary used when a document cannot be decoded."""

import re

from report_analyzer.artifacts.models import SourceArtifact

BYTES_PER_PAGE_ESTIMATE = 4000

# File names use "_" as a separator, so digit lookarounds stand in for \b.
_DATE_PATTERNS = (
    re.compile(r"(?<!\d)\d{4}-\d{2}-\d{2}(?!\d)"),
    re.compile(r"(?<!\d)\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4}(?!\d)"),
    re.compile(
        r"(?<![a-z])(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
        r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
        r"[\s_-]+\d{4}(?!\d)",
        re.IGNORECASE,
    ),
    re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)"),
)

_EXPECTED_SECTIONS = (
    "Executive Summary",
    "Key Performance Metrics",
    "Data Visualizations and Charts",
    "Recommendations",
)


def estimate_page_count(size_bytes: int) -> int:
    return max(1, size_bytes // BYTES_PER_PAGE_ESTIMATE)


def guess_document_type(name: str) -> str:
    lowered = name.lower()
    if "seo" in lowered:
        return "SEO Report"
    if "analytics" in lowered:
        return "Analytics Report"
    return "Performance Document"


def find_date_tokens(name: str) -> list[str]:
    """Date and year tokens in a file name, in order of appearance, without repeats."""
    found: list[tuple[int, str]] = []
    covered: list[tuple[int, int]] = []
    for pattern in _DATE_PATTERNS:
        for match in pattern.finditer(name):
            start, end = match.span()
            if any(start >= s and end <= e for s, e in covered):
                continue
            covered.append((start, end))
            found.append((start, match.group(0)))
    tokens: list[str] = []
    for _start, token in sorted(found):
        if token not in tokens:
            tokens.append(token)
    return tokens


def build_metadata_summary(artifact: SourceArtifact, reason: str) -> str:
    """Describe *artifact* from its name and size alone. Never raises."""
    name = artifact.name or "Document.pdf"
    lines = [
        f"Document Analysis for: {name}",
        f"File size: {artifact.size_bytes / 1024:.1f} KB",
        f"Estimated pages: {estimate_page_count(artifact.size_bytes)}",
        f"Document type: {guess_document_type(name)}",
    ]
    dates = find_date_tokens(name)
    if dates:
        lines.append(f"Dates referenced in file name: {', '.join(dates)}")
    lines.append("")
    lines.append(
        f"Text extraction was not possible ({reason}). "
        "This summary is built from file metadata only."
    )
    lines.append("")
    lines.append("Expected document sections:")
    lines.extend(f"- {section}" for section in _EXPECTED_SECTIONS)
    return "\n".join(lines)
