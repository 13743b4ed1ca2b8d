"""Run metadata and the assembled report of a single harness run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bowtielib.core.cases import Case
from bowtielib.core.dialects import Dialect
from bowtielib.core.implementation import Implementation
from bowtielib.core.results import ImplementationResults


@dataclass(frozen=True)
class RunMetadata:
    """Metadata about a run, taken from the first record of its report."""

    dialect: Dialect
    implementations: Mapping[str, Implementation]
    bowtie_version: str
    started: datetime
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReportData:
    """A fully parsed report."""

    run_metadata: RunMetadata
    cases: Mapping[int, Case]
    implementations_results: Mapping[str, ImplementationResults]
    did_fail_fast: bool = False
