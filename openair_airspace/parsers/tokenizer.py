"""
Line tokenizer for the OpenAir airspace format.

Splits a document into definition blocks and turns each line into a
``CommandToken``. Only the narrow OpenAir dialect below is understood:

    AC R
    AN Test Zone
    AL SFC
    AH 3500ft
    V X=51:30:00 N 000:10:00 W
    DC 5
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from openair_airspace.models.latlng import LatLng
from openair_airspace.models.validation import CoordinateParseError

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = '*'
COMMENT_MARKER = '*'

# (line number, raw line) pairs, line numbers start at 1
NumberedLine = Tuple[int, str]


class Command(Enum):
    """OpenAir commands understood by the interpreter."""
    AIRSPACE_NAME = "AN"
    AIRSPACE_CLASS = "AC"
    AIRSPACE_TYPE = "AT"
    ALTITUDE_LOW = "AL"
    ALTITUDE_HIGH = "AH"
    DRAW_CIRCLE = "DC"
    DRAW_ARC = "DA"
    DRAW_POINT = "DP"
    DRAW_BETWEEN = "DB"
    VARIABLE = "V"
    COMMENT = "*"
    UNRECOGNIZED = ""


@dataclass(frozen=True)
class CommandToken:
    """A single tokenized definition line."""

    command: Command
    argument: str
    line_number: int
    line: str


class OpenAirTokenizer:
    """
    Tokenizer for OpenAir definition text.

    Lines are matched against a single command pattern. The argument runs
    up to the first character outside letters, digits, whitespace and
    ``: . = + - ,``. Lines that do not match become UNRECOGNIZED tokens.
    """

    LINE_PATTERN = re.compile(
        r'^\s*(AN|AC|AL|AT|AH|DC|DA|DP|DB|V|\*) '
        r'([\w\s:.=+\-,]*)'
    )

    # DD:MM:SS[.f] N/S DDD:MM:SS[.f] E/W, seconds after ':' or '.'
    COORD_PATTERN = re.compile(
        r'(?<![\d.])(\d{1,3})\s*:\s*(\d{1,2})\s*[:.]\s*(\d{1,2}(?:\.\d+)?)\s*([NS])\s*'
        r'(\d{1,3})\s*:\s*(\d{1,2})\s*[:.]\s*(\d{1,2}(?:\.\d+)?)\s*([EW])',
        re.IGNORECASE
    )

    @classmethod
    def group_lines(cls, lines: Iterable[str]) -> List[List[NumberedLine]]:
        """
        Group lines into definition blocks.

        A line that is exactly ``*`` once trimmed separates blocks. Runs of
        separators collapse, and blocks holding only blank lines are dropped.

        Args:
            lines: Raw document lines

        Returns:
            List of blocks, each a list of (line number, line) pairs
        """
        blocks: List[List[NumberedLine]] = []
        current: List[NumberedLine] = []

        for line_number, line in enumerate(lines, start=1):
            if line.strip() == BLOCK_SEPARATOR:
                cls._close_block(blocks, current)
                current = []
            else:
                current.append((line_number, line))
        cls._close_block(blocks, current)

        return blocks

    @staticmethod
    def _close_block(blocks: List[List[NumberedLine]], block: List[NumberedLine]) -> None:
        if any(line.strip() for _, line in block):
            blocks.append(block)

    @staticmethod
    def is_comment(line: str) -> bool:
        """True when the line starts with the comment marker in the first column."""
        return line.startswith(COMMENT_MARKER)

    @classmethod
    def tokenize_line(cls, line: str, line_number: int = 0) -> CommandToken:
        """
        Extract the command and argument from a definition line.

        Returns:
            CommandToken, with Command.UNRECOGNIZED when the line does not
            have the command shape
        """
        match = cls.LINE_PATTERN.match(line)
        if not match:
            if line.strip():
                logger.debug(f"Ignoring unrecognized line {line_number}: {line.strip()}")
            return CommandToken(Command.UNRECOGNIZED, '', line_number, line)

        return CommandToken(Command(match.group(1)), match.group(2).strip(), line_number, line)

    @classmethod
    def tokenize_block(cls, block: List[NumberedLine]) -> List[CommandToken]:
        """Tokenize a block, dropping first-column comment lines."""
        return [
            cls.tokenize_line(line, line_number)
            for line_number, line in block
            if not cls.is_comment(line)
        ]

    @classmethod
    def parse_coordinate(cls, text: str) -> LatLng:
        """
        Parse an OpenAir coordinate string.

        Format: DD:MM:SS[.f] N/S DDD:MM:SS[.f] E/W (e.g. 51:30:00 N 000:10:00 W)

        Raises:
            CoordinateParseError: If the text does not contain a coordinate
        """
        match = cls.COORD_PATTERN.search(text)
        if not match:
            raise CoordinateParseError(text)

        lat = int(match.group(1)) + int(match.group(2)) / 60.0 + float(match.group(3)) / 3600.0
        if match.group(4).upper() == 'S':
            lat = -lat

        lng = int(match.group(5)) + int(match.group(6)) / 60.0 + float(match.group(7)) / 3600.0
        if match.group(8).upper() == 'W':
            lng = -lng

        return LatLng(lat, lng)
