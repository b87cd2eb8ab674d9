from report_analyzer.pdf.base import PositionedWord
from report_analyzer.pdf.layout import reconstruct_lines


def _word(text: str, x: float, y: float) -> PositionedWord:
    return PositionedWord(text=text, x=x, y=y)


class TestReconstructLines:
    def test_no_words(self) -> None:
        assert reconstruct_lines([], 3.0, 18.0) == []

    def test_orders_words_left_to_right(self) -> None:
        words = [_word("world", 50, 100.5), _word("hello", 10, 100)]
        assert reconstruct_lines(words, 3.0, 18.0) == ["hello world"]

    def test_vertical_jump_starts_new_line(self) -> None:
        words = [_word("second", 10, 112), _word("first", 10, 100)]
        assert reconstruct_lines(words, 3.0, 18.0) == ["first", "second"]

    def test_large_gap_inserts_paragraph_break(self) -> None:
        words = [_word("first", 10, 100), _word("second", 10, 130)]
        assert reconstruct_lines(words, 3.0, 18.0) == ["first", "", "second"]

    def test_tolerance_is_measured_from_line_anchor(self) -> None:
        words = [_word("a", 10, 100), _word("b", 20, 102), _word("c", 30, 104)]
        assert reconstruct_lines(words, 3.0, 18.0) == ["a b", "c"]

    def test_wide_horizontal_gap_is_kept(self) -> None:
        words = [
            PositionedWord(text="Keyword", x=72, y=100, x1=120),
            PositionedWord(text="Analysis", x=123, y=100, x1=170),
            PositionedWord(text="12", x=500, y=100, x1=512),
        ]
        assert reconstruct_lines(words, 3.0, 18.0) == ["Keyword Analysis  12"]

    def test_words_without_right_edge_use_single_space(self) -> None:
        words = [_word("Keyword", 72, 100), _word("12", 500, 100)]
        assert reconstruct_lines(words, 3.0, 18.0) == ["Keyword 12"]
