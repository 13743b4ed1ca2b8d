"""Conformance runners driving bowtielib."""

import json

from bowtielib.analysis import calculate_totals
from bowtielib.core import UnknownDialectError
from bowtielib.parser import ReportError, parse, parse_report
from tests.conformance.runner import ParseOutcome


class TextRunner:
    """Parses the report text with bowtielib's own decoder."""

    name = "text"

    def parse(self, text: str) -> ParseOutcome:
        try:
            report, diag = parse(text, "<conformance>")
        except (ReportError, UnknownDialectError) as e:
            return ParseOutcome(valid=False, diagnostics=[str(e)])
        return ParseOutcome(
            valid=True,
            totals=calculate_totals(report),
            did_fail_fast=report.did_fail_fast,
            diagnostics=[str(d) for d in diag.get_all()],
        )


class RecordsRunner:
    """Decodes each line with the json module, then aggregates the objects.

    Lines which are not JSON are reported the way the library reports them,
    so both runners agree on outcomes for the same log.
    """

    name = "records"

    def parse(self, text: str) -> ParseOutcome:
        records = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                return ParseOutcome(valid=False, diagnostics=[f"Invalid JSON: {e.msg}"])
        try:
            report = parse_report(records)
        except (ReportError, UnknownDialectError) as e:
            return ParseOutcome(valid=False, diagnostics=[str(e)])
        return ParseOutcome(
            valid=True,
            totals=calculate_totals(report),
            did_fail_fast=report.did_fail_fast,
        )
