"""Run-wide and per-implementation totals of an already parsed report."""

from __future__ import annotations

from collections.abc import Mapping

from bowtielib.core.report import ReportData
from bowtielib.core.results import ImplementationResults, PartialTotals, Totals


def calculate_totals(data: ReportData) -> Totals:
    """Sum the counters of every implementation in *data*.

    The total test count comes from the registered cases; the other counts
    are taken from the counters kept while the report was parsed.
    """
    total_tests = sum(len(case.tests) for case in data.cases.values())
    results = data.implementations_results.values()
    return Totals(
        total_tests=total_tests,
        errored_cases=sum(r.errored_cases for r in results),
        skipped_tests=sum(r.skipped_tests for r in results),
        failed_tests=sum(r.failed_tests for r in results),
        errored_tests=sum(r.errored_tests for r in results),
    )


def implementation_totals(
    implementations_results: Mapping[str, ImplementationResults],
) -> dict[str, PartialTotals]:
    """Return the errored, skipped and failed test counts of each implementation."""
    return {
        impl_id: PartialTotals(
            errored_tests=results.errored_tests,
            skipped_tests=results.skipped_tests,
            failed_tests=results.failed_tests,
        )
        for impl_id, results in implementations_results.items()
    }
