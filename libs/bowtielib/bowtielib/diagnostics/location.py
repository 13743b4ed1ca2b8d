"""Record location tracking for report diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A line (and optionally a column) in a line-delimited report."""

    source: str
    line: int  # 1-indexed
    column: int | None = None  # 1-indexed, only known for decode failures

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.source}:{self.line}"
        return f"{self.source}:{self.line}:{self.column}"
