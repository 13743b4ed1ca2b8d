"""JSON Schema dialect definitions and the default dialect resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


class UnknownDialectError(ValueError):
    """Raised when a dialect URI does not name a known dialect."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Unknown dialect {uri!r}")
        self.uri = uri


@dataclass(frozen=True)
class Dialect:
    """A published JSON Schema dialect, identified by its meta-schema URI."""

    uri: str
    short_name: str
    pretty_name: str
    first_published: int

    def __str__(self) -> str:
        return self.pretty_name

    @classmethod
    def known(cls) -> tuple[Dialect, ...]:
        """Return every known dialect, newest first."""
        return _KNOWN_DIALECTS

    @classmethod
    def for_uri(cls, uri: str) -> Dialect:
        """Resolve a meta-schema URI, ignoring an empty trailing fragment."""
        dialect = _BY_URI.get(uri.rstrip("#"))
        if dialect is None:
            raise UnknownDialectError(uri)
        return dialect

    @classmethod
    def for_short_name(cls, short_name: str) -> Dialect | None:
        """Look up a dialect by its short name, e.g. ``draft2020-12``."""
        for dialect in _KNOWN_DIALECTS:
            if dialect.short_name == short_name:
                return dialect
        return None


# Turns a raw dialect URI from a report into a Dialect.
DialectResolver = Callable[[str], Dialect]


_KNOWN_DIALECTS: tuple[Dialect, ...] = (
    Dialect("https://json-schema.org/draft/2020-12/schema", "draft2020-12", "Draft 2020-12", 2020),
    Dialect("https://json-schema.org/draft/2019-09/schema", "draft2019-09", "Draft 2019-09", 2019),
    Dialect("http://json-schema.org/draft-07/schema#", "draft7", "Draft 7", 2017),
    Dialect("http://json-schema.org/draft-06/schema#", "draft6", "Draft 6", 2017),
    Dialect("http://json-schema.org/draft-04/schema#", "draft4", "Draft 4", 2013),
    Dialect("http://json-schema.org/draft-03/schema#", "draft3", "Draft 3", 2010),
)

_BY_URI: dict[str, Dialect] = {d.uri.rstrip("#"): d for d in _KNOWN_DIALECTS}
