"""Report diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from bowtielib.diagnostics.collector import DiagnosticCollector
from bowtielib.diagnostics.diagnostic import Diagnostic
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
