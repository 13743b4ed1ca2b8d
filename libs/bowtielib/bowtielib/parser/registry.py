"""Registry of the cases defined so far in a report."""

from __future__ import annotations

from collections.abc import Iterator

from bowtielib.core.cases import Case
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser.errors import MissingCaseError


class CaseRegistry:
    """Cases keyed by the sequence number they were emitted under."""

    def __init__(self) -> None:
        self._cases: dict[int, Case] = {}

    def register(self, seq: int, case: Case) -> None:
        """Register *case* under *seq*, replacing any case already there."""
        self._cases[seq] = case

    def get(self, seq: int, location: SourceLocation | None = None) -> Case:
        """Return the case registered under *seq*.

        Raises:
            MissingCaseError: If no case was registered under *seq*. *location*
                should point at the record making the reference.
        """
        case = self._cases.get(seq)
        if case is None:
            raise MissingCaseError(seq, location)
        return case

    def __contains__(self, seq: object) -> bool:
        return seq in self._cases

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[int]:
        return iter(self._cases)

    def as_dict(self) -> dict[int, Case]:
        """Return a copy of the registered cases."""
        return dict(self._cases)
