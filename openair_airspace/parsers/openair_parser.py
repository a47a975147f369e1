"""
Parser for OpenAir airspace definitions.

Turns OpenAir text into a list of ``AirspacePolygon`` records, one per
definition block, skipping class G (glider) sectors.
"""

import logging
from typing import Iterable, List, Optional

from openair_airspace.models.airspace import AirspacePolygon
from openair_airspace.models.validation import CoordinateParseError, OpenAirParseError, ParseReport
from openair_airspace.parsers.interpreter import BlockAccumulator, CommandInterpreter, InterpreterContext
from openair_airspace.parsers.tokenizer import NumberedLine, OpenAirTokenizer

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_CLASSES = ('G',)


class OpenAirParser:
    """
    Parser for OpenAir documents.

    Every call to ``parse`` starts from a fresh interpreter context, so a
    single parser can be shared between threads.

    Malformed coordinate strings are handled according to ``strict``:
    - False (default): the command is skipped and the problem is recorded in
      the ParseReport
    - True: OpenAirParseError is raised

    Example:
        polygons = OpenAirParser().parse('''
            AC R
            AN Test Zone
            AL SFC
            AH 3500ft
            V X=51:30:00 N 000:10:00 W
            DC 5
        ''')
    """

    def __init__(self, strict: bool = False, excluded_classes: Optional[Iterable[str]] = None):
        """
        Args:
            strict: Raise on malformed coordinates instead of skipping them
            excluded_classes: Airspace classes dropped from the output
                (default: G)
        """
        self.strict = strict
        if excluded_classes is None:
            excluded_classes = DEFAULT_EXCLUDED_CLASSES
        self.excluded_classes = frozenset(c.upper() for c in excluded_classes)
        self._interpreter = CommandInterpreter()

    def parse(self, text: str) -> List[AirspacePolygon]:
        """
        Parse an OpenAir document.

        Args:
            text: Document text

        Returns:
            Polygons in document order, excluded classes removed

        Raises:
            TypeError: If text is not a string
            OpenAirParseError: In strict mode, on a malformed coordinate
        """
        return self.parse_with_report(text).polygons

    def parse_with_report(self, text: str) -> ParseReport:
        """Parse an OpenAir document and return polygons with diagnostics."""
        if not isinstance(text, str):
            raise TypeError(f"OpenAir text must be a string, got {type(text).__name__}")

        report = ParseReport()
        context = InterpreterContext()

        for block in OpenAirTokenizer.group_lines(text.splitlines()):
            report.blocks += 1
            polygon = self._parse_block(block, context, report)
            if polygon is None:
                report.excluded += 1
            else:
                report.polygons.append(polygon)

        logger.debug(f"Parsed {len(report.polygons)} polygons from {report.blocks} blocks "
                     f"({report.excluded} excluded, {len(report.issues)} issues)")
        return report

    def _parse_block(self, block: List[NumberedLine], context: InterpreterContext,
                     report: ParseReport) -> Optional[AirspacePolygon]:
        accumulator = BlockAccumulator()

        for token in OpenAirTokenizer.tokenize_block(block):
            try:
                self._interpreter.execute(token, context, accumulator)
            except CoordinateParseError as e:
                report.add_issue(token.line_number, token.line, f"cannot parse coordinate '{e.text}'")
                if self.strict:
                    raise OpenAirParseError(str(e), report=report, cause=e) from e
                logger.warning(f"Skipping {token.command.value} on line {token.line_number}: {e}")

        return self._assemble(accumulator)

    def _assemble(self, accumulator: BlockAccumulator) -> Optional[AirspacePolygon]:
        """Finalize a block, returning None when its class is excluded."""
        if accumulator.airspace_class in self.excluded_classes:
            logger.debug(f"Excluding class {accumulator.airspace_class} airspace {accumulator.name!r}")
            return None
        return accumulator.to_polygon()


def parse(text: str) -> List[AirspacePolygon]:
    """Parse OpenAir text with the default, lenient parser."""
    return OpenAirParser().parse(text)
