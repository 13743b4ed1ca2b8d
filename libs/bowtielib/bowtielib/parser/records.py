"""Record kinds found after a report's header.

Records on the wire carry no explicit tag; :func:`classify` infers the kind
from which fields are present and returns one of the tagged variants below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from bowtielib.core.cases import Case
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser import schemas

__all__ = [
    "CaseRecord",
    "CaughtErrorRecord",
    "SkippedRecord",
    "ResultEntry",
    "ResultsRecord",
    "EndMarkerRecord",
    "UnrecognizedRecord",
    "Record",
    "classify",
]


# ---------------------------------------------------------------------------
# Record variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CaseRecord:
    """Definition of the case run under ``seq``."""

    seq: int
    case: Case
    location: SourceLocation | None = None


@dataclass(frozen=True)
class CaughtErrorRecord:
    """An implementation failed on an entire case."""

    seq: int
    implementation: str
    message: str | None = None
    location: SourceLocation | None = None


@dataclass(frozen=True)
class SkippedRecord:
    """An implementation skipped an entire case."""

    seq: int
    implementation: str
    message: str | None = None
    location: SourceLocation | None = None


@dataclass(frozen=True)
class ResultEntry:
    """The outcome of one test, aligned positionally with the case's tests."""

    errored: bool = False
    skipped: bool = False
    valid: bool | None = None
    message: str | None = None


@dataclass(frozen=True)
class ResultsRecord:
    """Per-test results of an implementation for the case under ``seq``."""

    seq: int
    implementation: str
    results: tuple[ResultEntry, ...]
    location: SourceLocation | None = None


@dataclass(frozen=True)
class EndMarkerRecord:
    """Trailing record saying whether the run stopped early."""

    did_fail_fast: bool
    location: SourceLocation | None = None


@dataclass(frozen=True)
class UnrecognizedRecord:
    """Any record of a kind not listed above."""

    data: Mapping[str, Any]
    location: SourceLocation | None = None


Record = Union[
    CaseRecord,
    CaughtErrorRecord,
    SkippedRecord,
    ResultsRecord,
    EndMarkerRecord,
    UnrecognizedRecord,
]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _context_message(context: Mapping[str, Any] | None) -> str | None:
    """Error message from an error context: ``message``, falling back to ``stderr``."""
    if not context:
        return None
    message = context.get("message")
    if message is None:
        message = context.get("stderr")
    return message


def _result_entry(data: Mapping[str, Any]) -> ResultEntry:
    if data.get("errored"):
        return ResultEntry(errored=True, message=_context_message(data.get("context")))
    if data.get("skipped"):
        return ResultEntry(skipped=True, message=data.get("message"))
    return ResultEntry(valid=data.get("valid"))


def classify(data: Mapping[str, Any], location: SourceLocation | None = None) -> Record:
    """Classify a non-header record and check it has the shape of its kind.

    Kinds are tried in order: case definition, caught error, skipped case,
    per-test results, end marker. A record matching none of them is
    returned as an UnrecognizedRecord.

    Raises:
        MalformedRecordError: If the record's kind is recognized but its
            fields are missing or mistyped.
    """
    if "case" in data:
        schemas.check_shape(data, schemas.CASE_RECORD, "case", location)
        return CaseRecord(int(data["seq"]), Case.from_data(data["case"]), location)

    if "implementation" in data:
        if "caught" in data:
            schemas.check_shape(data, schemas.CAUGHT_ERROR_RECORD, "caught error", location)
            return CaughtErrorRecord(
                int(data["seq"]),
                data["implementation"],
                _context_message(data.get("context")),
                location,
            )
        if "skipped" in data:
            schemas.check_shape(data, schemas.SKIPPED_RECORD, "skipped", location)
            return SkippedRecord(
                int(data["seq"]),
                data["implementation"],
                data.get("message"),
                location,
            )
        if "results" in data:
            schemas.check_shape(data, schemas.RESULTS_RECORD, "results", location)
            return ResultsRecord(
                int(data["seq"]),
                data["implementation"],
                tuple(_result_entry(result) for result in data["results"]),
                location,
            )
    elif "did_fail_fast" in data:
        schemas.check_shape(data, schemas.END_MARKER_RECORD, "end marker", location)
        return EndMarkerRecord(data["did_fail_fast"], location)

    return UnrecognizedRecord(data, location)
