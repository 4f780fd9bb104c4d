"""
Unit tests for the line cursor (massif_parse.parsers.cursor).
"""

from __future__ import annotations

import io

import pytest

from massif_parse.exceptions import FormatError
from massif_parse.parsers.cursor import LineCursor


def _failing_source():
    yield "desc: ok\n"
    raise OSError("disk went away")


class TestAdvance:
    """Tests for LineCursor.advance() and line counting."""

    def test_initial_state(self):
        cursor = LineCursor(["a"])
        assert cursor.current == ""
        assert cursor.line_number == 0
        assert cursor.at_end is False

    def test_reads_lines_in_order(self):
        cursor = LineCursor(io.StringIO("first\nsecond\n"))
        cursor.advance()
        assert (cursor.current, cursor.line_number) == ("first", 1)
        cursor.advance()
        assert (cursor.current, cursor.line_number) == ("second", 2)
        assert cursor.at_end is False

    def test_strips_only_line_terminators(self):
        """Indentation and trailing spaces survive; \\n and \\r\\n do not."""
        cursor = LineCursor(["  n0: 12 below threshold  \r\n", " n1: x\n", "tail"])
        cursor.advance()
        assert cursor.current == "  n0: 12 below threshold  "
        cursor.advance()
        assert cursor.current == " n1: x"
        cursor.advance()
        assert cursor.current == "tail"

    def test_final_line_drops_lone_carriage_return(self):
        cursor = LineCursor(io.StringIO("heap_tree=empty\r", newline="\n"))
        cursor.advance()
        assert cursor.current == "heap_tree=empty"

    def test_only_one_carriage_return_is_dropped(self):
        cursor = LineCursor(["a\r\r\n", "b\r\r"])
        cursor.advance()
        assert cursor.current == "a\r"
        cursor.advance()
        assert cursor.current == "b\r"

    def test_exhaustion_sets_at_end(self):
        cursor = LineCursor(["only\n"])
        cursor.advance()
        cursor.advance()
        assert cursor.at_end is True
        assert cursor.current == ""
        assert cursor.line_number == 1

    def test_advance_past_end_is_noop(self):
        cursor = LineCursor([])
        cursor.advance()
        cursor.advance()
        cursor.advance()
        assert cursor.at_end is True
        assert cursor.line_number == 0


class TestEofContext:
    """Tests for end-of-input handling with an eof_context."""

    def test_raises_format_error_with_context(self):
        cursor = LineCursor(["#-----------\n"])
        cursor.advance()
        with pytest.raises(FormatError, match="unexpected end of file while parsing snapshot") as exc_info:
            cursor.advance("snapshot")
        assert exc_info.value.line_number == 1

    def test_no_error_while_lines_remain(self):
        cursor = LineCursor(["a\n", "b\n"])
        cursor.advance("snapshot")
        cursor.advance("snapshot")
        assert cursor.current == "b"


class TestSourceErrors:
    """I/O errors from the source are not format errors."""

    def test_os_error_propagates_unchanged(self):
        cursor = LineCursor(_failing_source())
        cursor.advance()
        with pytest.raises(OSError, match="disk went away"):
            cursor.advance()
