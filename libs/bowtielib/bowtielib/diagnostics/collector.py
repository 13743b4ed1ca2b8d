"""Diagnostic collector for non-fatal observations made while parsing a report."""

from __future__ import annotations

from bowtielib.diagnostics.diagnostic import Diagnostic
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics across one or more report parses."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        location: SourceLocation | None,
        notes: tuple[str, ...],
    ) -> None:
        self._diagnostics.append(Diagnostic(severity, message, location, notes))

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic, e.g. the error which aborted a parse."""
        self._add(DiagnosticSeverity.ERROR, message, location, notes)

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._add(DiagnosticSeverity.WARNING, message, location, notes)

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def warnings(self) -> list[Diagnostic]:
        """Return the warning diagnostics in the order they were recorded."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
