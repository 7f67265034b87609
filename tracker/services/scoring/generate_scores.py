"""Batch regeneration of per-phase score documents.

For each phase: load indicators and events, normalize within the phase,
score every distinct indicator date and write scores-<phase>.json.
A phase without indicators is skipped and its stale document removed.
One phase failing does not stop the others.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from tracker.ingestion.loaders import load_events_jsonl, load_indicators_csv
from tracker.schemas.records import Phase
from tracker.schemas.scores import ScoreTimeSeries, Weights
from tracker.services.scoring.normalizer import normalize_indicators_by_phase
from tracker.services.scoring.scoring_constants import DEFAULT_HALF_LIFE_MONTHS
from tracker.services.scoring.scoring_engine import compute_score_time_series
from tracker.services.scoring.series_writer import (
    build_time_series,
    scores_path,
    write_time_series,
)
from tracker.weights import DEFAULT_PRESET, get_preset

logger = logging.getLogger(__name__)


def indicators_path(data_dir: Path) -> Path:
    return data_dir / "processed" / "indicators.csv"


def events_path(data_dir: Path, phase: Phase) -> Path:
    return data_dir / "events" / f"{phase.value}-events.jsonl"


def generate_scores_for_phase(
    phase: Phase,
    data_dir: Path,
    weights: Weights,
    now: datetime | None = None,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> ScoreTimeSeries | None:
    """Compute and write the score document for one phase.

    Returns None (and deletes any stale document) when the phase has no
    indicators.

    Raises:
        MissingInputError: If indicators.csv does not exist.
    """
    all_indicators = load_indicators_csv(indicators_path(data_dir))
    output_path = scores_path(data_dir, phase)

    indicators = normalize_indicators_by_phase(all_indicators, phase)
    if not indicators:
        logger.warning("No indicators found for phase %s; skipping", phase.value)
        if output_path.exists():
            output_path.unlink()
            logger.info("Removed stale scores file %s", output_path)
        return None

    events = [ev for ev in load_events_jsonl(events_path(data_dir, phase)) if ev.phase == phase]

    dates = sorted({ind.date for ind in indicators})
    composite_scores = compute_score_time_series(
        indicators, events, dates, weights, half_life_months
    )
    series = build_time_series(
        phase,
        dates,
        composite_scores,
        last_updated=now or datetime.now(UTC),
    )
    write_time_series(series, output_path)
    logger.info(
        "Wrote %d composite scores for phase %s to %s",
        len(composite_scores),
        phase.value,
        output_path,
    )
    return series


def generate_all_scores(
    data_dir: Path,
    preset: str = DEFAULT_PRESET,
    now: datetime | None = None,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> dict:
    """Regenerate score documents for every phase.

    Raises UnknownPresetError before touching any phase if preset is invalid.

    Returns:
        dict with status, phases_generated, phases_skipped, phases_failed,
        generated, skipped, errors, error
    """
    weights = get_preset(preset)
    run_at = now or datetime.now(UTC)
    logger.info("Starting score generation, data_dir=%s preset=%s", data_dir, preset)

    generated: list[str] = []
    skipped: list[str] = []
    errors: list[str] = []

    for phase in Phase:
        try:
            series = generate_scores_for_phase(
                phase, data_dir, weights, now=run_at, half_life_months=half_life_months
            )
        except Exception as exc:
            logger.exception("Score generation failed for phase %s", phase.value)
            errors.append(f"{phase.value}: {exc}")
            continue
        if series is None:
            skipped.append(phase.value)
        else:
            generated.append(phase.value)

    logger.info(
        "Score generation completed: generated=%d, skipped=%d, failed=%d",
        len(generated),
        len(skipped),
        len(errors),
    )
    return {
        "status": "completed" if not errors else "completed_with_errors",
        "phases_generated": len(generated),
        "phases_skipped": len(skipped),
        "phases_failed": len(errors),
        "generated": generated,
        "skipped": skipped,
        "errors": errors,
        "error": "; ".join(errors) if errors else None,
    }
