"""Weight preset API routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from tracker.config import get_settings
from tracker.schemas.scores import Weights
from tracker.weights import UnknownPresetError, get_preset, list_presets

router = APIRouter()


@router.get("")
def api_list_presets() -> dict:
    """List every weight preset and the preset used for score generation."""
    return {
        "presets": {name: w.model_dump() for name, w in list_presets().items()},
        "default": get_settings().weight_preset,
    }


@router.get("/{name}", response_model=Weights)
def api_get_preset(name: str) -> Weights:
    """Return one preset's pillar weights."""
    try:
        return get_preset(name)
    except UnknownPresetError as exc:
        raise HTTPException(
            status_code=404,
            detail={"error": str(exc), "valid_presets": exc.available},
        ) from None
