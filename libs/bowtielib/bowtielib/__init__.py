"""Parsing and aggregation of Bowtie harness reports.

Layers, lowest first: ``diagnostics``, ``core``, ``parser``, ``analysis``.
"""

from bowtielib.analysis import calculate_totals, implementation_compliance
from bowtielib.core import ReportData, RunMetadata, Totals
from bowtielib.parser import ReportError, from_serialized, parse, parse_report

__version__ = "0.1.0"

__all__ = [
    "ReportData",
    "RunMetadata",
    "Totals",
    "ReportError",
    "parse",
    "parse_report",
    "from_serialized",
    "calculate_totals",
    "implementation_compliance",
]
