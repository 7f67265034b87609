"""API routes."""

from tracker.api.internal import router as internal_router
from tracker.api.presets import router as presets_router
from tracker.api.records import router as records_router
from tracker.api.scores import router as scores_router

__all__ = ["internal_router", "presets_router", "records_router", "scores_router"]
