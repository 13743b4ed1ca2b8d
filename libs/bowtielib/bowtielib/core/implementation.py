"""Descriptors of the validator implementations exercised by a run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bowtielib.core.dialects import Dialect, DialectResolver

# Descriptor keys that map onto typed Implementation fields. Everything else
# lands in ``Implementation.extra``.
_REQUIRED_FIELDS = ("language", "name", "homepage", "issues", "source")
_OPTIONAL_FIELDS = ("version", "documentation", "os", "os_version", "language_version")
_KNOWN_FIELDS = frozenset(_REQUIRED_FIELDS + _OPTIONAL_FIELDS + ("dialects", "links"))


@dataclass(frozen=True)
class Implementation:
    """A validator under test, as described in a report header."""

    language: str
    name: str
    homepage: str
    issues: str
    source: str
    dialects: tuple[Dialect, ...]
    version: str | None = None
    documentation: str | None = None
    links: tuple[Mapping[str, Any], ...] = ()
    os: str | None = None
    os_version: str | None = None
    language_version: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Any],
        resolve_dialect: DialectResolver = Dialect.for_uri,
    ) -> Implementation:
        """Build an Implementation from its raw descriptor.

        The descriptor's shape is expected to have been checked already;
        each dialect URI is passed through *resolve_dialect*.
        """
        return cls(
            dialects=tuple(resolve_dialect(uri) for uri in data["dialects"]),
            links=tuple(data.get("links", ())),
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
            **{name: data[name] for name in _REQUIRED_FIELDS},
            **{name: data.get(name) for name in _OPTIONAL_FIELDS},
        )

    def supports(self, dialect: Dialect) -> bool:
        """Return True if this implementation claims support for *dialect*."""
        return dialect in self.dialects
