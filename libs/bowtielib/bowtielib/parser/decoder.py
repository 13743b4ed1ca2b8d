"""Decoder turning line-delimited report text into generic records."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser.errors import DecodeError


@dataclass(frozen=True)
class DecodedRecord:
    """One JSON object from a report, together with the line it came from."""

    data: dict[str, Any]
    location: SourceLocation


def iter_records(text: str, source: str = "<string>") -> Iterator[DecodedRecord]:
    """Lazily decode *text*, one record per non-blank line.

    Lines may end in LF or CRLF. Raises DecodeError on the first line which
    is not a JSON object.
    """
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise DecodeError(
                f"Invalid JSON: {e.msg}",
                SourceLocation(source, lineno, e.colno),
            ) from e
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                SourceLocation(source, lineno, 1),
            )
        yield DecodedRecord(data, SourceLocation(source, lineno))


def decode_lines(text: str, source: str = "<string>") -> list[DecodedRecord]:
    """Decode every record in *text*."""
    return list(iter_records(text, source))
