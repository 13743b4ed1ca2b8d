"""Per-implementation results and the counters derived from them."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class CaseState(Enum):
    """Outcome of running one implementation against one test."""

    SUCCESSFUL = "successful"
    FAILED = "failed"
    SKIPPED = "skipped"
    ERRORED = "errored"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CaseResult:
    """The outcome of one test for one implementation.

    Successful and failed results carry the observed validity; skipped and
    errored results carry a message instead.
    """

    state: CaseState
    valid: bool | None = None
    message: str | None = None

    @classmethod
    def successful(cls, valid: bool | None) -> CaseResult:
        return cls(CaseState.SUCCESSFUL, valid=valid)

    @classmethod
    def failed(cls, valid: bool | None) -> CaseResult:
        return cls(CaseState.FAILED, valid=valid)

    @classmethod
    def skipped(cls, message: str | None) -> CaseResult:
        return cls(CaseState.SKIPPED, message=message)

    @classmethod
    def errored(cls, message: str | None) -> CaseResult:
        return cls(CaseState.ERRORED, message=message)


@dataclass
class ImplementationResults:
    """Results of one implementation over one run, keyed by case sequence number."""

    id: str
    cases: dict[int, list[CaseResult]] = field(default_factory=dict)
    errored_cases: int = 0
    skipped_tests: int = 0
    failed_tests: int = 0
    errored_tests: int = 0

    def state_counts(self) -> Counter[CaseState]:
        """Tally the states of every recorded result."""
        return Counter(result.state for results in self.cases.values() for result in results)


@dataclass(frozen=True)
class Totals:
    """Run-wide counts summed over every implementation."""

    total_tests: int = 0
    errored_cases: int = 0
    skipped_tests: int = 0
    failed_tests: int = 0
    errored_tests: int = 0

    @property
    def unsuccessful_tests(self) -> int:
        return self.skipped_tests + self.failed_tests + self.errored_tests


@dataclass(frozen=True)
class PartialTotals:
    """The per-implementation counts compared across runs."""

    errored_tests: int = 0
    skipped_tests: int = 0
    failed_tests: int = 0
