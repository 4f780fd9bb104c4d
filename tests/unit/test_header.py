"""
Unit tests for the header recognizer (massif_parse.parsers.header).

Tests field order, optionality, and cmd splitting.
"""

from __future__ import annotations

from massif_parse.parsers.cursor import LineCursor
from massif_parse.parsers.header import parse_header


def _primed(lines: list[str]) -> LineCursor:
    cursor = LineCursor(lines)
    cursor.advance()
    return cursor


class TestParseHeader:
    """Tests for parse_header()."""

    def test_all_fields(self):
        cursor = _primed([
            "desc: --massif-out-file=/outs/blah.massif",
            "cmd: /some/foo/command --first-option --second-option",
            "time_unit: i",
            "#-----------",
        ])
        header = parse_header(cursor)
        assert header.description == "--massif-out-file=/outs/blah.massif"
        assert header.binary == "/some/foo/command"
        assert header.args == ("--first-option", "--second-option")
        assert header.time_unit == "i"
        assert cursor.current == "#-----------"
        assert cursor.line_number == 4

    def test_no_header(self):
        """A profile may start directly with a snapshot."""
        cursor = _primed(["#-----------", "snapshot=0"])
        header = parse_header(cursor)
        assert header.description is None
        assert header.binary is None
        assert header.args == ()
        assert header.time_unit is None
        assert cursor.line_number == 1

    def test_missing_middle_field(self):
        cursor = _primed(["desc: (none)", "time_unit: ms"])
        header = parse_header(cursor)
        assert header.description == "(none)"
        assert header.binary is None
        assert header.time_unit == "ms"
        assert cursor.at_end is True

    def test_out_of_order_field_is_not_consumed(self):
        """Each candidate is tested once, so cmd after time_unit is left over."""
        cursor = _primed(["time_unit: B", "cmd: ./prog"])
        header = parse_header(cursor)
        assert header.time_unit == "B"
        assert header.binary is None
        assert cursor.current == "cmd: ./prog"

    def test_value_keeps_inner_spaces(self):
        cursor = _primed(["desc: --depth=5 --threshold=0.5"])
        header = parse_header(cursor)
        assert header.description == "--depth=5 --threshold=0.5"

    def test_prefix_requires_colon_and_space(self):
        cursor = _primed(["desc:nospace"])
        header = parse_header(cursor)
        assert header.description is None
        assert cursor.current == "desc:nospace"


class TestCommandSplitting:
    """Tests for the cmd: whitespace split."""

    def test_binary_only(self):
        header = parse_header(_primed(["cmd: ./a.out"]))
        assert header.binary == "./a.out"
        assert header.args == ()

    def test_collapses_runs_of_whitespace(self):
        header = parse_header(_primed(["cmd: prog   -v\t--x=1"]))
        assert header.binary == "prog"
        assert header.args == ("-v", "--x=1")

    def test_quotes_are_not_interpreted(self):
        header = parse_header(_primed(['cmd: prog "two words"']))
        assert header.args == ('"two', 'words"')

    def test_empty_command(self):
        header = parse_header(_primed(["cmd: "]))
        assert header.binary is None
        assert header.args == ()
