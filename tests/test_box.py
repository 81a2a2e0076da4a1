"""Tests for box drawing."""

import re

import pytest

from tinytui.ui.components import prepare_content_lines, show_box, show_box_row
from tinytui.ui.primitives import AnsiColor, strip_ansi

GOTO = re.compile(r'\x1b\[(\d+);(\d+)H')


def rows_by_position(output):
    """Split box output on cursor moves -> {(row, col): plain text}."""
    rows = {}
    matches = list(GOTO.finditer(output))
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(output)
        rows[(int(match.group(1)), int(match.group(2)))] = strip_ansi(output[match.end():end])
    return rows


class TestShowBoxValidation:
    @pytest.mark.parametrize("args", [
        (0, 1, 10, 5),
        (1, 0, 10, 5),
        (1, 1, 1, 5),
        (1, 1, 10, 1),
    ])
    def test_rejects_bad_geometry(self, args, term):
        with pytest.raises(ValueError):
            show_box(*args, writer=term)
        assert term.getvalue() == ""


class TestShowBox:
    def test_layout(self, term):
        show_box(3, 2, 8, 4, content=["hello"], writer=term)
        rows = rows_by_position(term.getvalue())
        assert rows == {
            (2, 3): "┌──────┐",
            (3, 3): "│hello │",
            (4, 3): "│      │",
            (5, 3): "└──────┘",
        }

    def test_smallest_box(self, term):
        show_box(1, 1, 2, 2, title="ignored", content=["x"], writer=term)
        rows = rows_by_position(term.getvalue())
        assert rows == {(1, 1): "┌┐", (2, 1): "└┘"}

    def test_title_centred(self, term):
        show_box(1, 1, 12, 3, title="Hi", writer=term)
        top = rows_by_position(term.getvalue())[(1, 1)]
        assert top == "┌─── Hi ───┐"

    def test_long_title_truncated(self, term):
        show_box(1, 1, 6, 3, title="A very long title", writer=term)
        top = rows_by_position(term.getvalue())[(1, 1)]
        assert top == "┌ A v┐"

    def test_wraps_and_cuts_content(self, term):
        show_box(1, 1, 6, 4, content=["abcdefghij", "never shown"], writer=term)
        rows = rows_by_position(term.getvalue())
        assert rows[(2, 1)] == "│abcd│"
        assert rows[(3, 1)] == "│efgh│"
        assert rows[(4, 1)] == "└────┘"

    def test_border_color(self, term):
        show_box(1, 1, 4, 3, writer=term, border_color=AnsiColor.CYAN, bright_border=True)
        assert "\x1b[96m┌" in term.getvalue()


class TestPrepareContentLines:
    def test_newlines_split(self):
        assert prepare_content_lines(["a\nb", "c"], 10, 5) == ["a", "b", "c"]

    def test_carriage_returns_normalized(self):
        assert prepare_content_lines(["a\r\nb\rc"], 10, 5) == ["a", "b", "c"]

    def test_blank_entries_kept(self):
        assert prepare_content_lines(["a", "", None, "b"], 10, 5) == ["a", "", "", "b"]

    def test_hard_wrap(self):
        assert prepare_content_lines(["abcdefg"], 3, 5) == ["abc", "def", "g"]

    def test_height_limit(self):
        assert prepare_content_lines(["abcdefg", "x"], 3, 2) == ["abc", "def"]

    def test_no_room(self):
        assert prepare_content_lines(["text"], 5, 0) == []
        assert prepare_content_lines(None, 5, 3) == []


class TestShowBoxRow:
    def test_cells(self, term):
        show_box_row(["ab", "cde"], writer=term)
        assert strip_ansi(term.getvalue()) == (
            "\r"
            "┌────┬─────┐\n"
            "│ ab │ cde │\n"
            "└────┴─────┘\n"
        )

    def test_empty_cells_skipped(self, term):
        show_box_row(["", "x", ""], writer=term)
        assert strip_ansi(term.getvalue()).split("\n")[1] == "│ x │"

    @pytest.mark.parametrize("contents", [None, [], ["", ""]])
    def test_nothing_to_draw(self, contents, term):
        show_box_row(contents, writer=term)
        assert term.getvalue() == ""

    def test_colors(self, term):
        show_box_row(["ok"], line_color=AnsiColor.RED, text_color=AnsiColor.GREEN, writer=term)
        output = term.getvalue()
        assert "\x1b[31m┌" in output
        assert "\x1b[32mok" in output
