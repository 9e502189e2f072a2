"""Tests for the greedy line layout."""

import pytest

from shelltyper.differ import WordDiff, classify
from shelltyper.errors import InvariantError
from shelltyper.layout import Span, SpanTag, layout_rows


def untyped(*words):
    return [classify(w, "") for w in words]


def row_text(row):
    return "".join(s.text for s in row)


class TestLayoutRows:

    def test_first_row_always_exists(self):
        assert layout_rows([], 10) == [[]]

    def test_single_row(self):
        rows = layout_rows(untyped("ab ", "cd"), 20)
        assert len(rows) == 1
        assert row_text(rows[0]) == "ab cd"

    def test_wraps_when_word_does_not_fit(self):
        rows = layout_rows(untyped("abc ", "def ", "ghi"), 8)
        assert [row_text(r) for r in rows] == ["abc def ", "ghi"]

    def test_separator_counts_against_width(self):
        rows = layout_rows(untyped("ab ", "cd ", "ef"), 5)
        assert [row_text(r) for r in rows] == ["ab ", "cd ef"]

    def test_gap_counts_against_width(self):
        rows = layout_rows([WordDiff("ab", "", ""), WordDiff("cd", "", ""), WordDiff("e", "", "")], 5)
        assert [row_text(r) for r in rows] == ["ab ", "cd e"]

    def test_long_word_not_preceded_by_empty_row(self):
        rows = layout_rows(untyped("abcdefghij ", "k"), 4)
        assert [row_text(r) for r in rows] == ["abcdefghij ", "k"]

    def test_only_non_empty_spans(self):
        rows = layout_rows([WordDiff("ab", "", ""), WordDiff("c", "", "d")], 20)
        assert rows == [[
            Span("ab", SpanTag.CORRECT),
            Span(" ", SpanTag.GAP),
            Span("c", SpanTag.CORRECT),
            Span("d", SpanTag.PENDING),
        ]]

    def test_typo_tags(self):
        rows = layout_rows([classify("ab ", "ax ")], 20)
        assert rows == [[
            Span("a", SpanTag.CORRECT),
            Span("x", SpanTag.WRONG),
            Span("b ", SpanTag.PENDING),
        ]]

    def test_no_gap_after_last_word(self):
        rows = layout_rows([WordDiff("ab", "", "")], 20)
        assert rows == [[Span("ab", SpanTag.CORRECT)]]

    def test_rows_never_exceed_width(self):
        words = ["alpha ", "be ", "gamma ", "delta ", "epsilon ", "zeta ", "eta ", "theta"]
        for width in range(8, 30):
            for row in layout_rows(untyped(*words), width):
                assert len(row_text(row)) <= width

    @pytest.mark.parametrize("width", [0, -3])
    def test_bad_width(self, width):
        with pytest.raises(InvariantError):
            layout_rows(untyped("ab"), width)
