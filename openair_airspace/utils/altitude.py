"""Altitude grammar for the AL/AH commands."""

import re
from typing import Optional, Union

SURFACE_KEYWORDS = ('SFC', 'GND')

# Suffixes accepted after a plain number, e.g. "3500ft", "2000 ALT"
_SUFFIX_PATTERN = re.compile(r'\s*(?:FT|ALT)\s*$')
_FLIGHT_LEVEL_PATTERN = re.compile(r'^FL\s*(\d+(?:\.\d+)?)$')
_NUMBER_PATTERN = re.compile(r'^[+-]?\d+(?:\.\d+)?$')


def _as_number(value: float) -> Union[int, float]:
    return int(value) if value.is_integer() else value


def parse_altitude(text: Optional[str]) -> Optional[Union[int, float]]:
    """
    Normalize an OpenAir altitude to feet.

    Accepts:
    - ``SFC`` or ``GND`` (surface, 0 ft)
    - ``FLnnn`` flight levels (nnn x 100 ft)
    - a number with an optional ``ft`` / ``ALT`` suffix

    Returns:
        Altitude in feet, or None if the text is not a recognized altitude
    """
    if text is None:
        return None
    value = text.strip().upper()
    if not value:
        return None
    if value in SURFACE_KEYWORDS:
        return 0

    match = _FLIGHT_LEVEL_PATTERN.match(value)
    if match:
        return _as_number(float(match.group(1)) * 100)

    while True:
        stripped = _SUFFIX_PATTERN.sub('', value)
        if stripped == value:
            break
        value = stripped

    if _NUMBER_PATTERN.match(value):
        return _as_number(float(value))
    return None


def format_altitude(feet: Optional[float]) -> str:
    """
    Format an altitude in feet for display.

    Examples:
        None -> "N/A", 0 -> "SFC", 6500 -> "FL065", 3500 -> "3500ft"
    """
    if feet is None:
        return 'N/A'
    if feet == 0:
        return 'SFC'
    if feet >= 5000 and feet % 100 == 0:
        return f"FL{int(feet // 100):03d}"
    return f"{_as_number(float(feet))}ft"
