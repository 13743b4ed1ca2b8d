"""Error types raised while parsing a report.

Every error here is fatal for the report being parsed: no partial report is
produced once one is raised.
"""

from __future__ import annotations

from bowtielib.diagnostics.location import SourceLocation


class ReportError(Exception):
    """Base class for unrecoverable report parsing errors."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.location = location

    def __str__(self) -> str:
        message = super().__str__()
        if self.location is None:
            return message
        return f"{self.location}: {message}"


class DecodeError(ReportError):
    """A line is not a well-formed JSON object."""


class MalformedRecordError(ReportError):
    """A record of a recognized kind is missing a field or has a mistyped one."""


class MalformedHeaderError(MalformedRecordError):
    """The header record is absent or does not have the required shape."""


class MissingCaseError(ReportError):
    """A result record refers to a sequence number with no registered case."""

    def __init__(self, seq: int, location: SourceLocation | None = None) -> None:
        super().__init__(f"No case registered for seq {seq}", location)
        self.seq = seq


class UnknownImplementationError(ReportError):
    """A result record names an implementation the header did not declare."""

    def __init__(self, implementation: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"Implementation {implementation!r} is not in the report header", location)
        self.implementation = implementation


class UnclassifiedRecordError(ReportError):
    """A record matches no known kind (raised only when parsing strictly)."""


class ConfigError(Exception):
    """Parse options could not be loaded."""
