"""
Validation module for OpenAir parsing.

This module provides the error types raised for invalid coordinates and
the diagnostics report collected while interpreting an OpenAir document.
"""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from openair_airspace.models.airspace import AirspacePolygon


class CoordinateError(ValueError):
    """Exception raised when a latitude or longitude is not a finite number."""


class CoordinateParseError(ValueError):
    """
    Exception raised when a coordinate string does not match the DMS grammar.

    The parser fills in ``line_number`` and ``line`` so the offending
    definition can be located in the source document.
    """

    def __init__(self, text: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.text = text
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"Cannot parse coordinate '{self.text}' on line {self.line_number}: {self.line}"
        return f"Cannot parse coordinate '{self.text}'"


@dataclass
class ParseIssue:
    """Represents a single problem found while interpreting a document."""

    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message} ({self.line.strip()})"


@dataclass
class ParseReport:
    """Result of parsing an OpenAir document, with diagnostics."""

    polygons: List['AirspacePolygon'] = field(default_factory=list)
    issues: List[ParseIssue] = field(default_factory=list)
    blocks: int = 0
    excluded: int = 0

    @property
    def is_valid(self) -> bool:
        """Check if parsing completed without issues."""
        return len(self.issues) == 0

    def add_issue(self, line_number: int, line: str, message: str) -> None:
        """Record a parsing issue."""
        self.issues.append(ParseIssue(line_number, line, message))

    def __str__(self) -> str:
        status = "Valid" if self.is_valid else f"Invalid ({len(self.issues)} issues)"
        return f"{status}: {len(self.polygons)} polygons from {self.blocks} blocks, {self.excluded} excluded"

    def get_issue_messages(self) -> List[str]:
        """Get all issue messages as strings."""
        return [str(issue) for issue in self.issues]


class OpenAirParseError(Exception):
    """Exception raised when strict parsing meets a malformed definition."""

    def __init__(self, message: str, report: Optional[ParseReport] = None, cause: Optional[Exception] = None):
        """
        Initialize parse error.

        Args:
            message: Error message
            report: ParseReport collected up to the failure
            cause: The underlying error, usually a CoordinateParseError
        """
        super().__init__(message)
        self.report = report
        self.cause = cause

    def __str__(self) -> str:
        if self.report and self.report.issues:
            issue_messages = "\n  - ".join(self.report.get_issue_messages())
            return f"{super().__str__()}\nIssues:\n  - {issue_messages}"
        return super().__str__()
