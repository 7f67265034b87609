"""Score document and trend analysis API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from tracker.config import get_settings
from tracker.schemas.records import Phase
from tracker.schemas.scores import ScoreTimeSeries
from tracker.schemas.trends import TrendAnalysis
from tracker.services.scoring.series_writer import (
    ScoresNotFoundError,
    ScoresUnavailableError,
    get_phase_scores,
)
from tracker.services.scoring.trends import analyze_trends

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_PHASE: str = Phase.post_jan6.value


def _parse_phase_or_400(phase: str) -> Phase:
    """Return the Phase for a query value; 400 when it is not a recognized phase."""
    try:
        return Phase(phase.strip())
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Invalid phase",
                "valid_phases": [p.value for p in Phase],
            },
        ) from None


def _load_scores_or_raise(phase: Phase) -> ScoreTimeSeries:
    """Load a phase's scores, mapping each failure to its HTTP status.

    Missing document or empty dates → 404 with guidance; anything else → 500.
    """
    try:
        return get_phase_scores(get_settings().data_dir, phase)
    except ScoresNotFoundError as exc:
        raise HTTPException(
            status_code=404,
            detail={
                "error": str(exc),
                "message": (
                    "This phase may not have data yet. Run "
                    "'python scripts/generate_scores.py' to generate scores for available phases."
                ),
                "phase": phase.value,
            },
        ) from None
    except ScoresUnavailableError as exc:
        raise HTTPException(
            status_code=404,
            detail={
                "error": str(exc),
                "message": (
                    "This phase has no indicator data. Add data to "
                    "data/processed/indicators.csv and run 'python scripts/generate_scores.py'."
                ),
                "phase": phase.value,
            },
        ) from None
    except Exception:
        logger.exception("Error loading scores for phase %s", phase.value)
        raise HTTPException(status_code=500, detail="Failed to load scores") from None


@router.get("", response_model=ScoreTimeSeries)
def api_get_scores(
    phase: str = Query(DEFAULT_PHASE, description="Phase identifier."),
) -> ScoreTimeSeries:
    """Return the stored composite score time series for a phase."""
    return _load_scores_or_raise(_parse_phase_or_400(phase))


@router.get("/trends", response_model=TrendAnalysis)
def api_get_trends(
    phase: str = Query(DEFAULT_PHASE, description="Phase identifier."),
    window: int | None = Query(
        None,
        ge=1,
        le=25,
        description="Rolling average window size. Default: TREND_WINDOW setting.",
    ),
) -> TrendAnalysis:
    """Return deltas, turning points, rolling average and summary for a phase."""
    series = _load_scores_or_raise(_parse_phase_or_400(phase))
    window_size = window if window is not None else get_settings().trend_window
    return analyze_trends(series, window_size)
