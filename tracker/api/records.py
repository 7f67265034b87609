"""Stored indicator and event record API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tracker.db.session import get_db
from tracker.schemas.records import Event, Indicator, Phase, Pillar
from tracker.services.records import list_events, list_indicators

router = APIRouter()


@router.get("/indicators", response_model=list[Indicator])
def api_list_indicators(
    phase: Phase | None = Query(None, description="Filter by phase."),
    pillar: Pillar | None = Query(None, description="Filter by pillar."),
    indicator: str | None = Query(None, description="Filter by indicator series name."),
    limit: int = Query(500, ge=1, le=5000, description="Maximum rows to return."),
    db: Session = Depends(get_db),
) -> list[Indicator]:
    """List stored indicator readings, oldest first."""
    return list_indicators(db, phase=phase, pillar=pillar, indicator=indicator, limit=limit)


@router.get("/events", response_model=list[Event])
def api_list_events(
    phase: Phase | None = Query(None, description="Filter by phase."),
    pillar: Pillar | None = Query(None, description="Only events affecting this pillar."),
    min_gravity: int | None = Query(None, ge=1, le=5, description="Minimum gravity."),
    limit: int = Query(500, ge=1, le=5000, description="Maximum rows to return."),
    db: Session = Depends(get_db),
) -> list[Event]:
    """List stored events, oldest first."""
    return list_events(db, phase=phase, pillar=pillar, min_gravity=min_gravity, limit=limit)
