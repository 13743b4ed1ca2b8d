"""Extraction of run metadata from a report's first record."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from bowtielib.core.dialects import Dialect, DialectResolver
from bowtielib.core.implementation import Implementation
from bowtielib.core.report import RunMetadata
from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser import schemas
from bowtielib.parser.errors import MalformedHeaderError


def started_at(timestamp: float, location: SourceLocation | None = None) -> datetime:
    """Convert a header's ``started`` value (milliseconds since the epoch).

    Raises:
        MalformedHeaderError: If the value is not a representable instant,
            e.g. ``Infinity``, ``NaN`` or far outside the supported years.
    """
    try:
        return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
    except (OverflowError, ValueError, OSError) as e:
        raise MalformedHeaderError(f"started {timestamp!r} is out of range", location) from e


def extract_header(
    record: Mapping[str, Any],
    resolve_dialect: DialectResolver = Dialect.for_uri,
    location: SourceLocation | None = None,
) -> RunMetadata:
    """Build the RunMetadata described by a report's header record.

    Args:
        record: The first decoded record of the report.
        resolve_dialect: Turns the run's and each implementation's dialect
            URIs into Dialects.
        location: Where the header came from, for error reporting.

    Returns:
        The run's metadata.

    Raises:
        MalformedHeaderError: If a required field is missing or mistyped, or
            ``started`` is not a representable instant.
        UnknownDialectError: If the default resolver does not know a dialect.
    """
    schemas.check_shape(record, schemas.HEADER, "header", location, MalformedHeaderError)
    implementations = {
        impl_id: Implementation.from_data(info, resolve_dialect)
        for impl_id, info in record["implementations"].items()
    }
    return RunMetadata(
        dialect=resolve_dialect(record["dialect"]),
        implementations=MappingProxyType(implementations),
        bowtie_version=record["bowtie_version"],
        started=started_at(record["started"], location),
        metadata=MappingProxyType(dict(record["metadata"])),
    )
