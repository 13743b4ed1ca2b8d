"""Per-implementation compliance across several runs (typically one per dialect)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from bowtielib.analysis.totals import implementation_totals
from bowtielib.core.implementation import Implementation
from bowtielib.core.report import ReportData
from bowtielib.core.results import PartialTotals


@dataclass
class ImplementationDialectCompliance:
    """An implementation and its counts in each run it took part in."""

    implementation: Implementation
    dialect_compliance: dict[str, PartialTotals] = field(default_factory=dict)


def implementation_compliance(
    reports: Mapping[str, ReportData],
) -> dict[str, ImplementationDialectCompliance]:
    """Invert per-run totals into a per-implementation table.

    Args:
        reports: Parsed reports keyed by a run identifier such as a dialect's
            short name.

    Returns:
        Implementation id mapped to its descriptor and to its counts per run
        identifier. The descriptor is the one from the first run mentioning
        the implementation.
    """
    compliance: dict[str, ImplementationDialectCompliance] = {}
    for key, report in reports.items():
        totals = implementation_totals(report.implementations_results)
        for impl_id, implementation in report.run_metadata.implementations.items():
            entry = compliance.setdefault(impl_id, ImplementationDialectCompliance(implementation))
            entry.dialect_compliance[key] = totals[impl_id]
    return compliance
