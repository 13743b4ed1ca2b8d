"""Single-pass aggregation of report records into a ReportData.

Handles, after the header:
- case definitions, registered under their sequence number
- caught errors, marking every test of a case as errored
- skipped cases, marking every test of a case as skipped
- per-test results, compared against each test's expected validity
- the end-of-run ``did_fail_fast`` marker
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bowtielib.core.dialects import Dialect, DialectResolver
from bowtielib.core.report import ReportData, RunMetadata
from bowtielib.core.results import CaseResult, ImplementationResults
from bowtielib.diagnostics.collector import DiagnosticCollector
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser.decoder import DecodedRecord, iter_records
from bowtielib.parser.errors import (
    MalformedHeaderError,
    MalformedRecordError,
    ReportError,
    UnclassifiedRecordError,
    UnknownImplementationError,
)
from bowtielib.parser.header import extract_header
from bowtielib.parser.options import ParseOptions
from bowtielib.parser.records import (
    CaseRecord,
    CaughtErrorRecord,
    EndMarkerRecord,
    Record,
    ResultsRecord,
    SkippedRecord,
    UnrecognizedRecord,
    classify,
)
from bowtielib.parser.registry import CaseRegistry

logger = logging.getLogger(__name__)


class ResultAggregator:
    """Folds the records following a report's header into a ReportData."""

    def __init__(
        self,
        run_metadata: RunMetadata,
        diagnostics: DiagnosticCollector | None = None,
        options: ParseOptions | None = None,
    ) -> None:
        self._metadata = run_metadata
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._options = options or ParseOptions()
        self._registry = CaseRegistry()
        self._results = {
            impl_id: ImplementationResults(impl_id) for impl_id in run_metadata.implementations
        }
        self._did_fail_fast = False
        self._seen_end_marker = False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _results_for(
        self,
        implementation: str,
        location: SourceLocation | None,
    ) -> ImplementationResults:
        results = self._results.get(implementation)
        if results is None:
            raise UnknownImplementationError(implementation, location)
        return results

    # ------------------------------------------------------------------
    # Record handlers
    # ------------------------------------------------------------------

    def feed(self, record: DecodedRecord) -> None:
        """Classify and consume one decoded record."""
        self.feed_record(classify(record.data, record.location))

    def feed_record(self, record: Record) -> None:
        """Consume one already classified record."""
        if isinstance(record, CaseRecord):
            self._on_case(record)
        elif isinstance(record, CaughtErrorRecord):
            self._on_caught_error(record)
        elif isinstance(record, SkippedRecord):
            self._on_skipped(record)
        elif isinstance(record, ResultsRecord):
            self._on_results(record)
        elif isinstance(record, EndMarkerRecord):
            self._on_end_marker(record)
        elif isinstance(record, UnrecognizedRecord):
            self._on_unrecognized(record)
        else:
            raise TypeError(f"Not a report record: {record!r}")

    def _on_case(self, record: CaseRecord) -> None:
        if record.seq in self._registry:
            if self._options.duplicate_cases == "error":
                raise MalformedRecordError(
                    f"Case seq {record.seq} is defined more than once",
                    record.location,
                )
            self._diag.warning(
                f"Case seq {record.seq} redefined, replacing the earlier definition",
                record.location,
            )
        self._registry.register(record.seq, record.case)

    def _on_caught_error(self, record: CaughtErrorRecord) -> None:
        case = self._registry.get(record.seq, record.location)
        results = self._results_for(record.implementation, record.location)
        count = len(case.tests)
        results.errored_cases += 1
        results.errored_tests += count
        results.cases[record.seq] = [CaseResult.errored(record.message)] * count

    def _on_skipped(self, record: SkippedRecord) -> None:
        case = self._registry.get(record.seq, record.location)
        results = self._results_for(record.implementation, record.location)
        count = len(case.tests)
        results.skipped_tests += count
        results.cases[record.seq] = [CaseResult.skipped(record.message)] * count

    def _on_results(self, record: ResultsRecord) -> None:
        case = self._registry.get(record.seq, record.location)
        results = self._results_for(record.implementation, record.location)
        if len(record.results) != len(case.tests):
            raise MalformedRecordError(
                f"Case seq {record.seq} has {len(case.tests)} tests "
                f"but {record.implementation!r} reported {len(record.results)} results",
                record.location,
            )

        case_results: list[CaseResult] = []
        for entry, test in zip(record.results, case.tests):
            if entry.errored:
                results.errored_tests += 1
                case_results.append(CaseResult.errored(entry.message))
            elif entry.skipped:
                results.skipped_tests += 1
                case_results.append(CaseResult.skipped(entry.message))
            elif entry.valid == test.valid:
                case_results.append(CaseResult.successful(entry.valid))
            else:
                results.failed_tests += 1
                case_results.append(CaseResult.failed(entry.valid))
        results.cases[record.seq] = case_results

    def _on_end_marker(self, record: EndMarkerRecord) -> None:
        if self._seen_end_marker:
            self._diag.warning("Report has more than one end marker", record.location)
        self._seen_end_marker = True
        self._did_fail_fast = record.did_fail_fast

    def _on_unrecognized(self, record: UnrecognizedRecord) -> None:
        keys = ", ".join(sorted(record.data)) or "no fields"
        if self._options.strict:
            raise UnclassifiedRecordError(
                f"Record of unknown kind ({keys})",
                record.location,
            )
        logger.debug("Ignoring unrecognized record at %s (%s)", record.location, keys)
        self._diag.warning(f"Ignoring record of unknown kind ({keys})", record.location)

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------

    def finish(self) -> ReportData:
        """Return the report assembled from every record fed so far.

        The report holds copies of the per-implementation results, so feeding
        further records does not change a report already returned.
        """
        logger.debug(
            "Aggregated %d case(s) for %d implementation(s), fail fast: %s",
            len(self._registry),
            len(self._results),
            self._did_fail_fast,
        )
        return ReportData(
            run_metadata=self._metadata,
            cases=self._registry.as_dict(),
            implementations_results={
                impl_id: dataclasses.replace(
                    results,
                    cases={seq: list(case_results) for seq, case_results in results.cases.items()},
                )
                for impl_id, results in self._results.items()
            },
            did_fail_fast=self._did_fail_fast,
        )


# ------------------------------------------------------------------
# Convenience functions
# ------------------------------------------------------------------


def _aggregate(
    records: Iterable[DecodedRecord],
    resolve_dialect: DialectResolver,
    diagnostics: DiagnosticCollector,
    options: ParseOptions | None,
) -> ReportData:
    it = iter(records)
    try:
        header = next(it, None)
        if header is None:
            raise MalformedHeaderError("Report is empty, expected a header record")
        metadata = extract_header(header.data, resolve_dialect, header.location)
        aggregator = ResultAggregator(metadata, diagnostics, options)
        for record in it:
            aggregator.feed(record)
    except ReportError as e:
        diagnostics.error(e.args[0], e.location)
        raise
    return aggregator.finish()


def parse_report(
    records: Iterable[Mapping[str, Any]],
    *,
    resolve_dialect: DialectResolver = Dialect.for_uri,
    diagnostics: DiagnosticCollector | None = None,
    options: ParseOptions | None = None,
) -> ReportData:
    """Parse a report from already deserialized JSON objects, header first."""
    decoded = (
        DecodedRecord(dict(data), SourceLocation("<records>", index))
        for index, data in enumerate(records, start=1)
    )
    if diagnostics is None:
        diagnostics = DiagnosticCollector()
    return _aggregate(decoded, resolve_dialect, diagnostics, options)


def parse(
    text: str,
    source: str = "<string>",
    *,
    resolve_dialect: DialectResolver = Dialect.for_uri,
    options: ParseOptions | None = None,
) -> tuple[ReportData, DiagnosticCollector]:
    """Parse a report from its line-delimited JSON text.

    Returns:
        A ``(report, diagnostics)`` tuple.
    """
    diag = DiagnosticCollector()
    report = _aggregate(iter_records(text, source), resolve_dialect, diag, options)
    return report, diag


def from_serialized(
    text: str,
    source: str = "<string>",
    *,
    resolve_dialect: DialectResolver = Dialect.for_uri,
    options: ParseOptions | None = None,
) -> ReportData:
    """Parse a report from its line-delimited JSON text, discarding diagnostics."""
    report, _ = parse(text, source, resolve_dialect=resolve_dialect, options=options)
    return report
