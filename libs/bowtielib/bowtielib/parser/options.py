"""Options controlling how strictly reports are parsed."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from bowtielib.parser.errors import ConfigError

DUPLICATE_CASE_POLICIES = ("warn", "error")


@dataclass(frozen=True)
class ParseOptions:
    """Parsing behaviour.

    Attributes:
        strict: Raise UnclassifiedRecordError on records of unknown kinds
            instead of ignoring them with a warning.
        duplicate_cases: What to do when a sequence number is defined twice:
            ``"warn"`` replaces the earlier case, ``"error"`` aborts the parse.
    """

    strict: bool = False
    duplicate_cases: str = "warn"

    def __post_init__(self) -> None:
        if self.duplicate_cases not in DUPLICATE_CASE_POLICIES:
            raise ConfigError(
                f"duplicate_cases must be one of {', '.join(DUPLICATE_CASE_POLICIES)}, "
                f"not {self.duplicate_cases!r}"
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ParseOptions:
        """Build options from a mapping, rejecting unknown or mistyped keys."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")
        if "strict" in data and not isinstance(data["strict"], bool):
            raise ConfigError(f"strict must be a boolean, not {data['strict']!r}")
        return cls(**data)


def load_options(path: str | Path) -> ParseOptions:
    """Load ParseOptions from the ``report`` section of a YAML file.

    An empty file, or one without a ``report`` section, gives the defaults.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read options file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ParseOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    section = data.get("report") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'report' in {path} to be a mapping")
    return ParseOptions.from_mapping(section)
