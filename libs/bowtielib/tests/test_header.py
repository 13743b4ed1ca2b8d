"""Tests for run metadata extraction."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bowtielib.core import Dialect, UnknownDialectError
from bowtielib.diagnostics import SourceLocation
from bowtielib.parser import (
    MalformedHeaderError,
    MalformedRecordError,
    ReportError,
    extract_header,
    from_serialized,
    parse_report,
)


class TestExtractHeader:
    def test_fields(self, header) -> None:
        metadata = extract_header(header)
        assert metadata.dialect == Dialect.for_short_name("draft2020-12")
        assert metadata.bowtie_version == "2024.1.1"
        assert metadata.metadata == {"ci": True}
        assert list(metadata.implementations) == ["impl-a"]
        assert metadata.implementations["impl-a"].language == "python"

    def test_started_is_milliseconds_since_epoch(self, header) -> None:
        header["started"] = 1_700_000_000_500
        metadata = extract_header(header)
        assert metadata.started == datetime(2023, 11, 14, 22, 13, 20, 500000, tzinfo=timezone.utc)

    @pytest.mark.parametrize("started", [1e20, -1e20, float("inf"), float("nan")])
    def test_started_out_of_range(self, header, started) -> None:
        header["started"] = started
        with pytest.raises(MalformedHeaderError, match="out of range") as exc_info:
            extract_header(header, location=SourceLocation("r.jsonl", 1))
        assert exc_info.value.location == SourceLocation("r.jsonl", 1)

    def test_started_infinity_in_log(self, header, to_jsonl) -> None:
        text = to_jsonl(header).replace("1700000000000", "Infinity")
        with pytest.raises(ReportError, match="out of range"):
            from_serialized(text)

    def test_started_out_of_range_is_a_report_error(self, header) -> None:
        header["started"] = 1e20
        with pytest.raises(ReportError):
            parse_report([header])

    def test_metadata_is_a_read_only_copy(self, header) -> None:
        metadata = extract_header(header)
        header["metadata"]["ci"] = False
        del header["implementations"]["impl-a"]
        assert metadata.metadata == {"ci": True}
        assert list(metadata.implementations) == ["impl-a"]
        with pytest.raises(TypeError):
            metadata.metadata["ci"] = False

    def test_no_implementations(self, header) -> None:
        header["implementations"] = {}
        assert extract_header(header).implementations == {}

    @pytest.mark.parametrize(
        "field", ["dialect", "bowtie_version", "metadata", "implementations", "started"]
    )
    def test_missing_field(self, header, field) -> None:
        del header[field]
        with pytest.raises(MalformedHeaderError, match=field):
            extract_header(header)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("dialect", 12),
            ("bowtie_version", None),
            ("metadata", []),
            ("implementations", []),
            ("started", "yesterday"),
            ("started", True),
        ],
    )
    def test_mistyped_field(self, header, field, value) -> None:
        header[field] = value
        with pytest.raises(MalformedHeaderError):
            extract_header(header)

    def test_implementation_missing_dialects(self, header) -> None:
        del header["implementations"]["impl-a"]["dialects"]
        with pytest.raises(MalformedHeaderError) as exc_info:
            extract_header(header, location=SourceLocation("r.jsonl", 1))
        assert "implementations -> impl-a" in str(exc_info.value)
        assert exc_info.value.location == SourceLocation("r.jsonl", 1)

    def test_is_a_malformed_record_error(self, header) -> None:
        del header["dialect"]
        with pytest.raises(MalformedRecordError):
            extract_header(header)

    def test_unknown_dialect(self, header) -> None:
        header["dialect"] = "urn:example:nope"
        with pytest.raises(UnknownDialectError):
            extract_header(header)

    def test_custom_resolver(self, header) -> None:
        seen: list[str] = []

        def resolve(uri: str) -> Dialect:
            seen.append(uri)
            return Dialect.for_short_name("draft4")

        metadata = extract_header(header, resolve)
        assert metadata.dialect.short_name == "draft4"
        assert header["dialect"] in seen
