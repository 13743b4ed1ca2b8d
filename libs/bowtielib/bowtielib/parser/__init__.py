"""Report parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from bowtielib.parser.aggregator import ResultAggregator, from_serialized, parse, parse_report
from bowtielib.parser.decoder import DecodedRecord, decode_lines, iter_records
from bowtielib.parser.errors import (
    ConfigError,
    DecodeError,
    MalformedHeaderError,
    MalformedRecordError,
    MissingCaseError,
    ReportError,
    UnclassifiedRecordError,
    UnknownImplementationError,
)
from bowtielib.parser.header import extract_header
from bowtielib.parser.options import ParseOptions, load_options
from bowtielib.parser.records import (
    CaseRecord,
    CaughtErrorRecord,
    EndMarkerRecord,
    Record,
    ResultEntry,
    ResultsRecord,
    SkippedRecord,
    UnrecognizedRecord,
    classify,
)
from bowtielib.parser.registry import CaseRegistry

__all__ = [
    "DecodedRecord",
    "iter_records",
    "decode_lines",
    "extract_header",
    "CaseRegistry",
    "CaseRecord",
    "CaughtErrorRecord",
    "SkippedRecord",
    "ResultEntry",
    "ResultsRecord",
    "EndMarkerRecord",
    "UnrecognizedRecord",
    "Record",
    "classify",
    "ResultAggregator",
    "parse_report",
    "parse",
    "from_serialized",
    "ParseOptions",
    "load_options",
    "ReportError",
    "DecodeError",
    "MalformedRecordError",
    "MalformedHeaderError",
    "MissingCaseError",
    "UnknownImplementationError",
    "UnclassifiedRecordError",
    "ConfigError",
]
