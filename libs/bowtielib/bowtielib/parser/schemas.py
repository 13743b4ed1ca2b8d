"""JSON Schemas describing the shape of each record kind.

Records are checked against these before any of their fields are used, so
that a missing or mistyped field is reported instead of defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from bowtielib.diagnostics.location import SourceLocation
from bowtielib.parser.errors import MalformedRecordError

_NULLABLE_STRING: dict[str, Any] = {"type": ["string", "null"]}

_CONTEXT: dict[str, Any] = {
    "type": ["object", "null"],
    "properties": {"message": _NULLABLE_STRING, "stderr": _NULLABLE_STRING},
}

IMPLEMENTATION: dict[str, Any] = {
    "type": "object",
    "required": ["language", "name", "homepage", "issues", "source", "dialects"],
    "properties": {
        "language": {"type": "string"},
        "name": {"type": "string"},
        "homepage": {"type": "string"},
        "issues": {"type": "string"},
        "source": {"type": "string"},
        "dialects": {"type": "array", "items": {"type": "string"}},
        "version": _NULLABLE_STRING,
        "documentation": _NULLABLE_STRING,
        "links": {"type": "array", "items": {"type": "object"}},
        "os": _NULLABLE_STRING,
        "os_version": _NULLABLE_STRING,
        "language_version": _NULLABLE_STRING,
    },
}

HEADER: dict[str, Any] = {
    "type": "object",
    "required": ["dialect", "bowtie_version", "metadata", "implementations", "started"],
    "properties": {
        "dialect": {"type": "string"},
        "bowtie_version": {"type": "string"},
        "metadata": {"type": "object"},
        "implementations": {"type": "object", "additionalProperties": IMPLEMENTATION},
        "started": {"type": "number"},
    },
}

TEST: dict[str, Any] = {
    "type": "object",
    "required": ["description", "instance"],
    "properties": {
        "description": {"type": "string"},
        "comment": {"type": "string"},
        "valid": {"type": "boolean"},
    },
}

CASE_RECORD: dict[str, Any] = {
    "type": "object",
    "required": ["seq", "case"],
    "properties": {
        "seq": {"type": "integer"},
        "case": {
            "type": "object",
            "required": ["description", "schema", "tests"],
            "properties": {
                "description": {"type": "string"},
                "comment": {"type": "string"},
                "schema": {"type": ["object", "boolean"]},
                "registry": {"type": "object"},
                "tests": {"type": "array", "minItems": 1, "items": TEST},
            },
        },
    },
}

_IMPLEMENTATION_RECORD: dict[str, Any] = {
    "seq": {"type": "integer"},
    "implementation": {"type": "string"},
}

CAUGHT_ERROR_RECORD: dict[str, Any] = {
    "type": "object",
    "required": ["seq", "implementation", "caught"],
    "properties": {**_IMPLEMENTATION_RECORD, "context": _CONTEXT},
}

SKIPPED_RECORD: dict[str, Any] = {
    "type": "object",
    "required": ["seq", "implementation", "skipped"],
    "properties": {**_IMPLEMENTATION_RECORD, "message": _NULLABLE_STRING},
}

RESULTS_RECORD: dict[str, Any] = {
    "type": "object",
    "required": ["seq", "implementation", "results"],
    "properties": {
        **_IMPLEMENTATION_RECORD,
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "valid": {"type": "boolean"},
                    "context": _CONTEXT,
                    "message": _NULLABLE_STRING,
                },
            },
        },
    },
}

END_MARKER_RECORD: dict[str, Any] = {
    "type": "object",
    "required": ["did_fail_fast"],
    "properties": {"did_fail_fast": {"type": "boolean"}},
}


_VALIDATORS: dict[int, Draft202012Validator] = {}


def _validator_for(schema: dict[str, Any]) -> Draft202012Validator:
    validator = _VALIDATORS.get(id(schema))
    if validator is None:
        Draft202012Validator.check_schema(schema)
        validator = _VALIDATORS[id(schema)] = Draft202012Validator(schema)
    return validator


def check_shape(
    record: Mapping[str, Any],
    schema: dict[str, Any],
    kind: str,
    location: SourceLocation | None = None,
    error_class: type[MalformedRecordError] = MalformedRecordError,
) -> None:
    """Raise *error_class* if *record* does not match *schema*.

    Args:
        record: The decoded record.
        schema: One of the record schemas defined in this module.
        kind: Human-readable record kind used in the error message.
        location: Where the record came from.
        error_class: The error raised on a mismatch.
    """
    error = best_match(_validator_for(schema).iter_errors(record))
    if error is None:
        return
    message = f"Malformed {kind} record: {error.message}"
    if error.absolute_path:
        message += f" (at {' -> '.join(str(p) for p in error.absolute_path)})"
    raise error_class(message, location)
