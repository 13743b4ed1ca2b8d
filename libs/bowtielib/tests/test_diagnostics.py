from __future__ import annotations

from bowtielib.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSeverity,
    SourceLocation,
)


class TestSourceLocation:
    def test_line_only(self):
        loc = SourceLocation("report.jsonl", 10)
        assert loc.source == "report.jsonl"
        assert loc.line == 10
        assert loc.column is None
        assert str(loc) == "report.jsonl:10"

    def test_with_column(self):
        loc = SourceLocation("report.jsonl", 3, 7)
        assert str(loc) == "report.jsonl:3:7"


class TestDiagnostic:
    def test_creation_minimal(self):
        diag = Diagnostic(DiagnosticSeverity.ERROR, "bad record")
        assert diag.location is None
        assert diag.notes == ()
        assert str(diag) == "error: bad record"

    def test_str_with_location_and_notes(self):
        loc = SourceLocation("r.jsonl", 2)
        diag = Diagnostic(DiagnosticSeverity.WARNING, "ignored", loc, notes=("kind unknown",))
        assert str(diag) == "r.jsonl:2: warning: ignored\n  note: kind unknown"


class TestDiagnosticCollector:
    def test_empty(self):
        collector = DiagnosticCollector()
        assert not collector.has_errors()
        assert collector.get_all() == []
        assert collector.format_all() == ""
        assert len(collector) == 0

    def test_warnings_do_not_count_as_errors(self):
        collector = DiagnosticCollector()
        collector.warning("first")
        assert not collector.has_errors()
        assert [d.message for d in collector.warnings()] == ["first"]

    def test_error(self):
        collector = DiagnosticCollector()
        collector.error("broken", SourceLocation("r.jsonl", 1))
        assert collector.has_errors()
        assert collector.get_all()[0].severity == DiagnosticSeverity.ERROR

    def test_get_all_returns_copy(self):
        collector = DiagnosticCollector()
        collector.warning("w")
        collector.get_all().clear()
        assert len(collector) == 1

    def test_format_all(self):
        collector = DiagnosticCollector()
        collector.warning("one")
        collector.warning("two")
        assert collector.format_all() == "warning: one\nwarning: two"
