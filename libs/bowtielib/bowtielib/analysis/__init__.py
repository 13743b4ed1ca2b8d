"""Report analysis subpackage (Layer 3 -- depends on core)."""

from bowtielib.analysis.compliance import ImplementationDialectCompliance, implementation_compliance
from bowtielib.analysis.totals import calculate_totals, implementation_totals

__all__ = [
    "calculate_totals",
    "implementation_totals",
    "ImplementationDialectCompliance",
    "implementation_compliance",
]
