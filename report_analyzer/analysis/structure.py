"""Heading and table-of-contents detection over reconstructed text lines."""

import re

SECTION_KEYWORDS: frozenset[str] = frozenset({
    "summary",
    "executive summary",
    "introduction",
    "overview",
    "recommendations",
    "findings",
    "key findings",
    "conclusion",
    "conclusions",
    "methodology",
    "next steps",
    "key metrics",
    "results",
    "analysis",
    "appendix",
    "table of contents",
    "contents",
})

_NUMBERED_SECTION = re.compile(r"^\d{1,2}(?:\.\d{1,2})*\.?\s+[A-Z][^.!?]*$")
_TOC_ENTRY = re.compile(
    r"^(?P<title>[A-Za-z0-9].*?)\s*(?:\.{3,}|…+|\s{2,}|\t)\s*(?P<page>\d{1,3})$"
)
_MAX_HEADING_LENGTH = 80
_MAX_HEADING_WORDS = 10


def is_toc_entry(line: str) -> bool:
    """True for lines like ``Keyword Analysis ........ 12``."""
    return _TOC_ENTRY.match(line.strip()) is not None


def is_heading_candidate(line: str) -> bool:
    stripped = line.strip()
    if len(stripped) < 3 or len(stripped) > _MAX_HEADING_LENGTH:
        return False
    if len(stripped.split()) > _MAX_HEADING_WORDS or is_toc_entry(stripped):
        return False
    if stripped.rstrip(":").lower() in SECTION_KEYWORDS:
        return True
    if _NUMBERED_SECTION.match(stripped):
        return True
    letters = [ch for ch in stripped if ch.isalpha()]
    return len(letters) >= 3 and stripped.isupper()


def find_headings(lines: list[str]) -> list[str]:
    return [line.strip() for line in lines if is_heading_candidate(line)]


def find_toc_entries(lines: list[str]) -> list[str]:
    return [line.strip() for line in lines if is_toc_entry(line)]
