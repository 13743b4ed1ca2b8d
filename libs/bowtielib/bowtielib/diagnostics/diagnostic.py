"""Diagnostic message representation."""

from __future__ import annotations

from dataclasses import dataclass

from bowtielib.diagnostics.location import SourceLocation
from bowtielib.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message about a report record."""

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        text = f"{loc}{self.severity}: {self.message}"
        if self.notes:
            text += "".join(f"\n  note: {note}" for note in self.notes)
        return text
