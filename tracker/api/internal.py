"""Internal job endpoints for cron/scripts.

These endpoints are secured with a static token (X-Internal-Token header).
They are meant for automated triggers only.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from tracker.config import get_settings
from tracker.services.scoring.generate_scores import generate_all_scores
from tracker.weights import UnknownPresetError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/internal", include_in_schema=False)


# ── Token dependency ────────────────────────────────────────────────


def _require_internal_token(x_internal_token: str = Header(...)) -> None:
    """Validate the internal job token from the request header.

    Uses constant-time comparison. Raises 403 if the token is empty or does
    not match the configured value.
    """
    expected = get_settings().internal_job_token
    if not expected or not secrets.compare_digest(x_internal_token, expected):
        logger.warning("Internal endpoint auth failed: invalid or missing token")
        raise HTTPException(status_code=403, detail="Invalid internal token")


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("/run_generate_scores")
def run_generate_scores(
    _token: None = Depends(_require_internal_token),
    preset: str | None = Query(None, description="Weight preset; WEIGHT_PRESET setting if omitted"),
):
    """Regenerate score documents for every phase.

    Returns the job summary with phases_generated, phases_skipped, phases_failed.
    """
    settings = get_settings()
    try:
        return generate_all_scores(
            settings.data_dir,
            preset=preset or settings.weight_preset,
            half_life_months=settings.decay_half_life_months,
        )
    except UnknownPresetError as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": str(exc), "valid_presets": exc.available},
        ) from None
    except Exception as exc:
        logger.exception("Internal score generation failed")
        return {"status": "failed", "error": str(exc)}
