"""Build, write and read per-phase ScoreTimeSeries documents."""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

from tracker.schemas.records import Phase
from tracker.schemas.scores import CompositeScore, DateRange, ScoreTimeSeries, SeriesMetadata


class ScoresNotFoundError(LookupError):
    """No score document exists for the phase."""

    def __init__(self, phase: Phase) -> None:
        self.phase = phase
        super().__init__(f'Scores not found for phase "{phase.value}".')


class ScoresUnavailableError(LookupError):
    """The phase's score document exists but holds no dates."""

    def __init__(self, phase: Phase) -> None:
        self.phase = phase
        super().__init__(f'No data available for phase "{phase.value}".')


def scores_path(data_dir: Path, phase: Phase) -> Path:
    return data_dir / "processed" / f"scores-{phase.value}.json"


def build_time_series(
    phase: Phase,
    dates: list[date],
    composite_scores: list[CompositeScore],
    last_updated: datetime,
) -> ScoreTimeSeries:
    """Assemble the persisted document. dates must be non-empty and ascending."""
    if not dates:
        raise ValueError("cannot build a score time series without dates")
    return ScoreTimeSeries(
        dates=list(dates),
        composite_scores=list(composite_scores),
        metadata=SeriesMetadata(
            phase=phase,
            date_range=DateRange(start=dates[0], end=dates[-1]),
            last_updated=last_updated,
        ),
    )


def series_to_json(series: ScoreTimeSeries) -> str:
    return json.dumps(series.model_dump(mode="json"), indent=2)


def series_from_json(payload: str) -> ScoreTimeSeries:
    return ScoreTimeSeries.model_validate_json(payload)


def write_time_series(series: ScoreTimeSeries, path: Path) -> Path:
    """Write the document as pretty JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(series_to_json(series), encoding="utf-8")
    return path


def get_phase_scores(data_dir: Path, phase: Phase) -> ScoreTimeSeries:
    """Return the phase's non-empty score document.

    Raises:
        ScoresNotFoundError: No document for the phase.
        ScoresUnavailableError: Document has no dates (no indicator data yet).
    """
    raw_path = scores_path(data_dir, phase)
    if not raw_path.exists():
        raise ScoresNotFoundError(phase)
    payload = json.loads(raw_path.read_text(encoding="utf-8"))
    if not payload.get("dates"):
        raise ScoresUnavailableError(phase)
    return ScoreTimeSeries.model_validate(payload)
