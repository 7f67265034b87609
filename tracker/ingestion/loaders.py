"""Load indicator CSV and event JSONL files into record schemas.

A malformed row is logged and dropped; it never aborts the load. A missing
indicator file is an error for the caller, a missing event file is not.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tracker.ingestion.provenance import infer_confidence, validate_source_url
from tracker.schemas.records import Event, Indicator

logger = logging.getLogger(__name__)


class MalformedRecordWarning(UserWarning):
    """A single raw record could not be parsed. Logged and dropped by loaders."""


class MissingInputError(FileNotFoundError):
    """A required input file does not exist."""


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_indicator_row(row: dict[str, Any]) -> Indicator:
    """Build an Indicator from one CSV row.

    normalized_value is ignored: values are renormalized per phase. A blank
    confidence is inferred from source_url.

    Raises:
        MalformedRecordWarning: When required fields are missing or invalid.
    """
    source_url = (row.get("source_url") or "").strip()
    data: dict[str, Any] = {
        "date": _blank_to_none(row.get("date")),
        "phase": _blank_to_none(row.get("phase")),
        "pillar": _blank_to_none(row.get("pillar")),
        "indicator": (row.get("indicator") or "").strip(),
        "value": _blank_to_none(row.get("value")),
        "source_url": source_url,
        "confidence": _blank_to_none(row.get("confidence")) or infer_confidence(source_url),
        "location": _blank_to_none(row.get("location")),
    }
    direction = _blank_to_none(row.get("direction"))
    if direction is not None:
        data["direction"] = direction
    try:
        return Indicator.model_validate(data)
    except ValidationError as exc:
        raise MalformedRecordWarning(f"invalid indicator row: {exc.error_count()} error(s)") from exc


def parse_event_line(line: str) -> Event:
    """Build an Event from one JSONL line.

    Source URLs that are not http(s) are dropped; an event left without
    sources is malformed. A missing confidence is inferred from the first source.

    Raises:
        MalformedRecordWarning: When the line is not a valid event object.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise MalformedRecordWarning(f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise MalformedRecordWarning("event line must be a JSON object")

    sources = data.get("sources")
    if isinstance(sources, str):
        sources = [sources]
    if not isinstance(sources, list):
        raise MalformedRecordWarning("event 'sources' must be a list of URLs")
    valid_sources = [s.strip() for s in sources if isinstance(s, str) and validate_source_url(s)]
    if not valid_sources:
        raise MalformedRecordWarning("event has no valid http(s) source URL")
    data["sources"] = valid_sources
    if not data.get("confidence"):
        data["confidence"] = infer_confidence(valid_sources[0])

    try:
        return Event.model_validate(data)
    except ValidationError as exc:
        raise MalformedRecordWarning(f"invalid event: {exc.error_count()} error(s)") from exc


def load_indicators_csv(path: Path) -> list[Indicator]:
    """Load indicators from a CSV file with a header row.

    Raises:
        MissingInputError: If the file does not exist.
    """
    if not path.exists():
        raise MissingInputError(f"Indicator file not found: {path}")

    indicators: list[Indicator] = []
    skipped = 0
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames:
            reader.fieldnames = [name.strip() for name in reader.fieldnames]
        for line_no, row in enumerate(reader, start=2):
            clean = {k: v.strip() if isinstance(v, str) else v for k, v in row.items() if k}
            try:
                indicators.append(parse_indicator_row(clean))
            except MalformedRecordWarning as exc:
                skipped += 1
                logger.warning("Skipping indicator %s:%d: %s", path.name, line_no, exc)

    logger.info("Loaded %d indicators from %s (skipped=%d)", len(indicators), path, skipped)
    return indicators


def load_events_jsonl(path: Path) -> list[Event]:
    """Load events from a JSONL file, one event per line. Missing file ⇒ []."""
    if not path.exists():
        logger.info("No event file at %s", path)
        return []

    events: list[Event] = []
    skipped = 0
    with path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                events.append(parse_event_line(line))
            except MalformedRecordWarning as exc:
                skipped += 1
                logger.warning("Skipping event %s:%d: %s", path.name, line_no, exc)

    logger.info("Loaded %d events from %s (skipped=%d)", len(events), path, skipped)
    return events
