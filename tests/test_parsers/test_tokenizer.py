"""Tests for the OpenAir tokenizer."""

import pytest

from openair_airspace.models.validation import CoordinateParseError
from openair_airspace.parsers.tokenizer import Command, OpenAirTokenizer


class TestGroupLines:
    """Tests for block grouping."""

    def test_single_block(self):
        blocks = OpenAirTokenizer.group_lines(["AC R", "AN Zone"])
        assert blocks == [[(1, "AC R"), (2, "AN Zone")]]

    def test_separators_split_blocks(self):
        blocks = OpenAirTokenizer.group_lines(["AC R", "*", "AC D"])
        assert [[line for _, line in block] for block in blocks] == [["AC R"], ["AC D"]]

    def test_consecutive_separators_collapse(self):
        lines = ["*", "*", "AC R", "*", "  *  ", "*", "AC D", "*", "*"]
        blocks = OpenAirTokenizer.group_lines(lines)
        assert len(blocks) == 2
        assert blocks[1] == [(7, "AC D")]

    def test_blank_only_blocks_are_dropped(self):
        blocks = OpenAirTokenizer.group_lines(["AC R", "*", "", "   ", "*", ""])
        assert len(blocks) == 1

    def test_comment_lines_stay_in_block(self):
        """Only a bare '*' separates blocks; '* text' belongs to the block."""
        blocks = OpenAirTokenizer.group_lines(["* header", "AC R"])
        assert len(blocks) == 1
        assert blocks[0][0] == (1, "* header")

    def test_empty_input(self):
        assert OpenAirTokenizer.group_lines([]) == []


class TestTokenizeLine:
    """Tests for command extraction."""

    @pytest.mark.parametrize("line,command,argument", [
        ("AN Test Zone", Command.AIRSPACE_NAME, "Test Zone"),
        ("AC R", Command.AIRSPACE_CLASS, "R"),
        ("AT CTR", Command.AIRSPACE_TYPE, "CTR"),
        ("AL SFC", Command.ALTITUDE_LOW, "SFC"),
        ("AH 3500ft", Command.ALTITUDE_HIGH, "3500ft"),
        ("DC 5", Command.DRAW_CIRCLE, "5"),
        ("DA 5,270,290", Command.DRAW_ARC, "5,270,290"),
        ("DP 51:30:00 N 000:10:00 W", Command.DRAW_POINT, "51:30:00 N 000:10:00 W"),
        ("DB 1:0:0 N 1:0:0 E, 2:0:0 N 2:0:0 E", Command.DRAW_BETWEEN, "1:0:0 N 1:0:0 E, 2:0:0 N 2:0:0 E"),
        ("V X=51:30:00 N 000:10:00 W", Command.VARIABLE, "X=51:30:00 N 000:10:00 W"),
        ("V D=-", Command.VARIABLE, "D=-"),
        ("  AC C  ", Command.AIRSPACE_CLASS, "C"),
        (" * indented comment", Command.COMMENT, "indented comment"),
    ])
    def test_commands(self, line, command, argument):
        token = OpenAirTokenizer.tokenize_line(line, 4)
        assert token.command == command
        assert token.argument == argument
        assert token.line_number == 4
        assert token.line == line

    @pytest.mark.parametrize("line", [
        "",
        "SP 0,1,0,0,0",
        "XX something",
        "an lower case",
        "AN",
        "ACR",
        "!AN bad",
    ])
    def test_unrecognized(self, line):
        token = OpenAirTokenizer.tokenize_line(line)
        assert token.command == Command.UNRECOGNIZED
        assert token.argument == ''

    def test_argument_stops_at_unsupported_character(self):
        token = OpenAirTokenizer.tokenize_line("AN London (City)")
        assert token.argument == "London"

    def test_tokenize_block_drops_comments(self):
        block = [(1, "*comment"), (2, "* another"), (3, "AC R"), (4, "DC 5")]
        tokens = OpenAirTokenizer.tokenize_block(block)
        assert [t.command for t in tokens] == [Command.AIRSPACE_CLASS, Command.DRAW_CIRCLE]
        assert [t.line_number for t in tokens] == [3, 4]


class TestParseCoordinate:
    """Tests for the DMS coordinate grammar."""

    def test_north_west(self):
        point = OpenAirTokenizer.parse_coordinate("51:30:00 N 000:10:00 W")
        assert point.lat == pytest.approx(51.5)
        assert point.lng == pytest.approx(-10 / 60)

    def test_south_east(self):
        point = OpenAirTokenizer.parse_coordinate("33:52:04 S 151:12:36 E")
        assert point.lat == pytest.approx(-(33 + 52 / 60 + 4 / 3600))
        assert point.lng == pytest.approx(151 + 12 / 60 + 36 / 3600)

    def test_period_separator_and_fraction(self):
        point = OpenAirTokenizer.parse_coordinate("39:29.9 N 119:46.1 W")
        assert point.lat == pytest.approx(39 + 29 / 60 + 9 / 3600)
        assert point.lng == pytest.approx(-(119 + 46 / 60 + 1 / 3600))

    def test_fractional_seconds(self):
        point = OpenAirTokenizer.parse_coordinate("50:00:30.5 N 001:00:00 E")
        assert point.lat == pytest.approx(50 + 30.5 / 3600)

    def test_flexible_whitespace_and_case(self):
        point = OpenAirTokenizer.parse_coordinate("51 : 30 : 00n 000:10:00w")
        assert point.lat == pytest.approx(51.5)
        assert point.lng == pytest.approx(-10 / 60)

    def test_coordinate_inside_assignment(self):
        point = OpenAirTokenizer.parse_coordinate("X=51:30:00 N 000:10:00 W")
        assert point.lat == pytest.approx(51.5)

    @pytest.mark.parametrize("text", [
        "",
        "51:30 N 000:10 W",
        "51.5 -0.16",
        "51:30:00 000:10:00",
        "51:30:00 N",
        "garbage",
        "9" * 400 + ":00:00 N 001:00:00 E",
        "51:30:00 N " + "1" * 400 + ":00:00 E",
    ])
    def test_malformed(self, text):
        with pytest.raises(CoordinateParseError) as exc_info:
            OpenAirTokenizer.parse_coordinate(text)
        assert exc_info.value.text == text
        assert exc_info.value.line_number is None
