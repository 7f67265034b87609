"""File ingestion of indicator and event records."""

from tracker.ingestion.loaders import (
    MalformedRecordWarning,
    MissingInputError,
    load_events_jsonl,
    load_indicators_csv,
    parse_event_line,
    parse_indicator_row,
)
from tracker.ingestion.provenance import infer_confidence, validate_source_url

__all__ = [
    "MalformedRecordWarning",
    "MissingInputError",
    "infer_confidence",
    "load_events_jsonl",
    "load_indicators_csv",
    "parse_event_line",
    "parse_indicator_row",
    "validate_source_url",
]
