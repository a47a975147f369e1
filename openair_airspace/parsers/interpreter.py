"""
Command interpreter for OpenAir definitions.

Each ``CommandToken`` mutates either the block being built
(``BlockAccumulator``) or the state that carries over between blocks
(``InterpreterContext``).
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from openair_airspace.models.airspace import AirspacePolygon
from openair_airspace.models.latlng import LatLng
from openair_airspace.models.validation import CoordinateParseError
from openair_airspace.parsers.tokenizer import Command, CommandToken, OpenAirTokenizer
from openair_airspace.utils.altitude import parse_altitude
from openair_airspace.utils.geodesy import (
    destination_point,
    great_circle_distance,
    initial_heading,
    nautical_miles_to_meters,
)

logger = logging.getLogger(__name__)

STEP_SIZE_DEG = 1
CIRCLE_POINTS = 360
MAX_ARC_STEPS = 360


@dataclass
class InterpreterContext:
    """
    State that persists across blocks of one document.

    Attributes:
        reference_center: Last center assigned with ``V X=...``
        step_direction: +1 (clockwise) or -1, set with ``V D=+`` / ``V D=-``
    """

    reference_center: Optional[LatLng] = None
    step_direction: int = 1


@dataclass
class BlockAccumulator:
    """Points and metadata of the block currently being interpreted."""

    boundary_points: List[LatLng] = field(default_factory=list)
    name: Optional[str] = None
    airspace_class: Optional[str] = None
    base_altitude_ft: Optional[Union[int, float]] = None
    ceiling_altitude_ft: Optional[Union[int, float]] = None

    def add_point(self, point: LatLng) -> None:
        self.boundary_points.append(point)

    def to_polygon(self) -> AirspacePolygon:
        """Build the output record, defaulting the base altitude to 0."""
        return AirspacePolygon(
            coordinates=tuple(self.boundary_points),
            base_altitude_ft=self.base_altitude_ft if self.base_altitude_ft is not None else 0,
            ceiling_altitude_ft=self.ceiling_altitude_ft,
            name=self.name,
            airspace_class=self.airspace_class,
        )


class CommandInterpreter:
    """
    Applies tokenized OpenAir commands.

    Center-dependent commands (DC, DA, DB) are ignored with a warning when
    no center has been assigned yet. Malformed coordinate strings raise
    ``CoordinateParseError``; the caller decides whether that is fatal.
    """

    VARIABLE_PATTERN = re.compile(r'^(\w+)\s*=\s*(.*)$')
    ARC_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)\s*,\s*([+-]?\d{1,3})\s*,\s*([+-]?\d{1,3})(?!\d)')
    BETWEEN_PATTERN = re.compile(r'^(.+?)\s*,\s*(.+)$')
    RADIUS_PATTERN = re.compile(r'^\d+(?:\.\d+)?')

    def __init__(self):
        self._handlers: Dict[Command, Callable[[CommandToken, InterpreterContext, BlockAccumulator], None]] = {
            Command.AIRSPACE_NAME: self._airspace_name,
            Command.AIRSPACE_CLASS: self._airspace_class,
            Command.AIRSPACE_TYPE: self._airspace_type,
            Command.ALTITUDE_LOW: self._altitude_low,
            Command.ALTITUDE_HIGH: self._altitude_high,
            Command.DRAW_CIRCLE: self._draw_circle,
            Command.DRAW_ARC: self._draw_arc,
            Command.DRAW_POINT: self._draw_point,
            Command.DRAW_BETWEEN: self._draw_between,
            Command.VARIABLE: self._variable,
        }

    def execute(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        """
        Apply one command.

        Raises:
            CoordinateParseError: If a DP, DB or center assignment holds a
                malformed coordinate string
        """
        handler = self._handlers.get(token.command)
        if handler is None:
            # Comments and unrecognized lines
            return
        try:
            handler(token, context, block)
        except CoordinateParseError as e:
            raise CoordinateParseError(e.text, token.line_number, token.line.strip()) from e

    def _airspace_name(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        block.name = token.argument

    def _airspace_class(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        block.airspace_class = token.argument.upper()

    def _airspace_type(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        # Recognized, no effect on the output
        logger.debug(f"Airspace type '{token.argument}' on line {token.line_number} ignored")

    def _altitude_low(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        altitude = self._parse_altitude(token)
        if altitude is not None:
            block.base_altitude_ft = altitude

    def _altitude_high(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        altitude = self._parse_altitude(token)
        if altitude is not None:
            block.ceiling_altitude_ft = altitude

    @staticmethod
    def _parse_altitude(token: CommandToken) -> Optional[Union[int, float]]:
        altitude = parse_altitude(token.argument)
        if altitude is None:
            logger.warning(f"Unrecognized altitude '{token.argument}' on line {token.line_number}")
        return altitude

    def _draw_circle(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        match = self.RADIUS_PATTERN.match(token.argument)
        if not match:
            logger.warning(f"Unrecognized circle radius '{token.argument}' on line {token.line_number}")
            return
        center = self._require_center(token, context)
        if center is None:
            return

        radius = self._radius_meters(token, match.group(0))
        if radius is None:
            return
        for degree in range(CIRCLE_POINTS):
            block.add_point(destination_point(center, radius, degree))

    def _variable(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        match = self.VARIABLE_PATTERN.match(token.argument)
        if not match:
            logger.debug(f"Ignoring variable assignment without value on line {token.line_number}")
            return

        name, value = match.group(1).upper(), match.group(2).strip()
        if name == 'D':
            context.step_direction = 1 if value == '+' else -1
        else:
            context.reference_center = OpenAirTokenizer.parse_coordinate(value)

    def _draw_arc(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        match = self.ARC_PATTERN.match(token.argument)
        if not match:
            logger.warning(f"Unrecognized arc arguments '{token.argument}' on line {token.line_number}")
            return
        center = self._require_center(token, context)
        if center is None:
            return

        radius = self._radius_meters(token, match.group(1))
        if radius is None:
            return
        self.walk_arc(center, radius, int(match.group(2)), int(match.group(3)), context.step_direction, block)

    def _draw_point(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        block.add_point(OpenAirTokenizer.parse_coordinate(token.argument))

    def _draw_between(self, token: CommandToken, context: InterpreterContext, block: BlockAccumulator) -> None:
        match = self.BETWEEN_PATTERN.match(token.argument)
        if not match:
            raise CoordinateParseError(token.argument)
        start = OpenAirTokenizer.parse_coordinate(match.group(1))
        end = OpenAirTokenizer.parse_coordinate(match.group(2))

        center = self._require_center(token, context)
        if center is None:
            return

        from_deg = (initial_heading(center, start) + 360) % 360
        to_deg = (initial_heading(center, end) + 360) % 360
        radius = great_circle_distance(center, start)
        self.walk_arc(center, radius, from_deg, to_deg, context.step_direction, block)

    @staticmethod
    def _radius_meters(token: CommandToken, value: str) -> Optional[float]:
        radius = nautical_miles_to_meters(float(value))
        if not math.isfinite(radius):
            logger.warning(f"Radius '{value}' out of range on line {token.line_number}")
            return None
        return radius

    @staticmethod
    def _require_center(token: CommandToken, context: InterpreterContext) -> Optional[LatLng]:
        if context.reference_center is None:
            logger.warning(f"Ignoring {token.command.value} on line {token.line_number}: no center defined")
        return context.reference_center

    @staticmethod
    def walk_arc(center: LatLng, radius: float, from_deg: float, to_deg: float,
                 step_direction: int, block: BlockAccumulator) -> None:
        """
        Append arc points around ``center`` from ``from_deg`` towards ``to_deg``.

        Steps one degree at a time in ``step_direction`` and stops once the
        wrapped heading is within one step of ``to_deg``. The start point is
        always emitted; the end heading itself is not.
        """
        to_deg = to_deg % 360
        step = step_direction * STEP_SIZE_DEG
        degrees = from_deg
        for _ in range(MAX_ARC_STEPS):
            block.add_point(destination_point(center, radius, degrees))
            degrees += step
            if abs((degrees % 360) - to_deg) < STEP_SIZE_DEG:
                break
