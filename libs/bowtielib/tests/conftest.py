"""Shared report fixtures."""

from __future__ import annotations

import json

import pytest

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"
DRAFT_7 = "http://json-schema.org/draft-07/schema#"


def _implementation_data(name: str = "jsonschema", **extra) -> dict:
    return {
        "language": "python",
        "name": name,
        "homepage": f"https://example.com/{name}",
        "issues": f"https://example.com/{name}/issues",
        "source": f"https://example.com/{name}/src",
        "dialects": [DRAFT_2020_12, DRAFT_7],
        **extra,
    }


@pytest.fixture
def header() -> dict:
    """A header declaring a single implementation, ``impl-a``."""
    return {
        "dialect": DRAFT_2020_12,
        "bowtie_version": "2024.1.1",
        "metadata": {"ci": True},
        "implementations": {"impl-a": _implementation_data()},
        "started": 1_700_000_000_000,
    }


@pytest.fixture
def two_test_case() -> dict:
    """Case record at seq 1 with tests expecting valid=true then valid=false."""
    return {
        "seq": 1,
        "case": {
            "description": "integer type",
            "schema": {"type": "integer"},
            "tests": [
                {"description": "an integer", "instance": 1, "valid": True},
                {"description": "a string", "instance": "foo", "valid": False},
            ],
        },
    }


@pytest.fixture
def make_implementation():
    """Build a raw implementation descriptor."""
    return _implementation_data


@pytest.fixture
def to_jsonl():
    """Serialize records as a report's line-delimited text."""

    def serialize(*records: dict) -> str:
        return "".join(json.dumps(record) + "\n" for record in records)

    return serialize
