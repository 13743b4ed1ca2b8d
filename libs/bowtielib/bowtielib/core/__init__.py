"""Report data model subpackage (Layer 1 — zero internal dependencies)."""

from bowtielib.core.cases import Case, Schema, Test
from bowtielib.core.dialects import Dialect, DialectResolver, UnknownDialectError
from bowtielib.core.implementation import Implementation
from bowtielib.core.report import ReportData, RunMetadata
from bowtielib.core.results import (
    CaseResult,
    CaseState,
    ImplementationResults,
    PartialTotals,
    Totals,
)

__all__ = [
    "Dialect",
    "DialectResolver",
    "UnknownDialectError",
    "Implementation",
    "Schema",
    "Test",
    "Case",
    "CaseState",
    "CaseResult",
    "ImplementationResults",
    "Totals",
    "PartialTotals",
    "RunMetadata",
    "ReportData",
]
