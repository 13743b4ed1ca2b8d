"""Test cases and the individual tests they contain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

# A schema is either a JSON object or one of the boolean schemas.
Schema = Union[Mapping[str, Any], bool]


def _frozen(value: Any) -> Any:
    """Read-only shallow copy of a mapping; other values are returned as is."""
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return value


@dataclass(frozen=True)
class Test:
    """One instance checked against its case's schema.

    ``valid`` is None when validity is not a pass/fail criterion for the test.
    """

    __test__ = False  # not a pytest test class

    description: str
    instance: Any
    comment: str | None = None
    valid: bool | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Test:
        return cls(
            description=data["description"],
            instance=data["instance"],
            comment=data.get("comment"),
            valid=data.get("valid"),
        )


@dataclass(frozen=True)
class Case:
    """A schema together with a non-empty sequence of tests."""

    description: str
    schema: Schema
    tests: tuple[Test, ...]
    comment: str | None = None
    registry: Mapping[str, Any] | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Case:
        return cls(
            description=data["description"],
            schema=_frozen(data["schema"]),
            tests=tuple(Test.from_data(test) for test in data["tests"]),
            comment=data.get("comment"),
            registry=_frozen(data.get("registry")),
        )
