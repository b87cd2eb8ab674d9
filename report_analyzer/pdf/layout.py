from report_analyzer.pdf.base import PositionedWord

# Horizontal gap, in points, kept as a double space (TOC page columns, tables).
COLUMN_GAP = 20.0
COLUMN_SEPARATOR = "  "


def reconstruct_lines(
    words: list[PositionedWord],
    line_tolerance: float,
    paragraph_gap: float,
) -> list[str]:
    """Group positioned words into text lines.

    Words whose top coordinate lies within *line_tolerance* of the current
    line's anchor join that line; a larger jump starts a new line, and a jump
    above *paragraph_gap* also emits a blank line as a paragraph boundary.
    Words within a line are ordered left to right.
    """
    if not words:
        return []

    ordered = sorted(words, key=lambda word: (word.y, word.x))
    lines: list[str] = []
    current: list[PositionedWord] = [ordered[0]]
    anchor_y = ordered[0].y

    for word in ordered[1:]:
        if abs(word.y - anchor_y) <= line_tolerance:
            current.append(word)
            continue
        lines.append(_join(current))
        if word.y - anchor_y > paragraph_gap:
            lines.append("")
        current = [word]
        anchor_y = word.y

    lines.append(_join(current))
    return lines


def _join(words: list[PositionedWord]) -> str:
    ordered = sorted(words, key=lambda word: word.x)
    parts = [ordered[0].text]
    for previous, word in zip(ordered, ordered[1:]):
        wide = previous.x1 is not None and word.x - previous.x1 >= COLUMN_GAP
        parts.append(COLUMN_SEPARATOR if wide else " ")
        parts.append(word.text)
    return "".join(parts)
