"""Tests for application/services/highlighter.py."""

from asqview.application.services.highlighter import (
    classify_rows,
    is_matched,
    matched_rows,
    split_content,
)
from asqview.domain.model.pane import RowRole
from tests.factories import make_location

LINES = ("l1", "l2", "l3", "l4", "l5", "l6")


class TestIsMatched:
    """Tests for is_matched()."""

    def test_span_rows(self) -> None:
        loc = make_location(line=3, span_line_count=2)
        assert [row for row in range(6) if is_matched(row, loc)] == [2, 3]

    def test_zero_span_matches_nothing(self) -> None:
        loc = make_location(line=3, span_line_count=0)
        assert not any(is_matched(row, loc) for row in range(6))

    def test_column_is_ignored(self) -> None:
        a = make_location(line=2, column=1, span_line_count=1)
        b = make_location(line=2, column=40, span_line_count=1)
        assert [is_matched(r, a) for r in range(4)] == [is_matched(r, b) for r in range(4)]


class TestClassifyRows:
    """Tests for classify_rows()."""

    def test_roles_per_row(self) -> None:
        roles = classify_rows(LINES, make_location(line=3, span_line_count=2))
        assert roles == (
            RowRole.DEFAULT,
            RowRole.DEFAULT,
            RowRole.MATCHED,
            RowRole.MATCHED,
            RowRole.DEFAULT,
            RowRole.DEFAULT,
        )

    def test_idempotent(self) -> None:
        loc = make_location(line=2, span_line_count=3)
        assert classify_rows(LINES, loc) == classify_rows(LINES, loc)

    def test_span_past_end_is_clipped(self) -> None:
        roles = classify_rows(("a", "b"), make_location(line=2, span_line_count=10))
        assert roles == (RowRole.DEFAULT, RowRole.MATCHED)

    def test_line_past_end_matches_nothing(self) -> None:
        roles = classify_rows(("a", "b"), make_location(line=9, span_line_count=1))
        assert roles == (RowRole.DEFAULT, RowRole.DEFAULT)

    def test_empty_lines(self) -> None:
        assert classify_rows((), make_location(span_line_count=1)) == ()


class TestMatchedRows:
    """Tests for matched_rows()."""

    def test_rows_within_content(self) -> None:
        assert matched_rows(LINES, make_location(line=5, span_line_count=4)) == (4, 5)


class TestSplitContent:
    """Tests for split_content()."""

    def test_trailing_newline_gives_empty_row(self) -> None:
        assert split_content("a\nb\n") == ("a", "b", "")

    def test_empty_text_is_one_row(self) -> None:
        assert split_content("") == ("",)
