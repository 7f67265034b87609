"""Store and query imported indicator and event records."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from tracker.models import EventRecord, IndicatorRecord
from tracker.schemas.records import Event, Indicator, Phase, Pillar

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT: int = 500


def store_indicators(db: Session, indicators: list[Indicator]) -> int:
    """Insert indicator rows. Returns the number inserted."""
    for ind in indicators:
        db.add(
            IndicatorRecord(
                date=ind.date,
                phase=ind.phase.value,
                pillar=ind.pillar.value,
                indicator=ind.indicator,
                value=ind.value,
                direction=ind.direction.value,
                confidence=ind.confidence.value,
                source_url=ind.source_url,
                location=ind.location,
            )
        )
    db.commit()
    logger.info("Stored %d indicators", len(indicators))
    return len(indicators)


def store_events(db: Session, events: list[Event]) -> int:
    """Insert event rows. Returns the number inserted."""
    for ev in events:
        db.add(
            EventRecord(
                date=ev.date,
                phase=ev.phase.value,
                pillars=[p.value for p in ev.pillars],
                gravity=ev.gravity,
                description=ev.description,
                location=ev.location,
                sources=list(ev.sources),
                confidence=ev.confidence.value,
                indicator_impact=list(ev.indicator_impact) if ev.indicator_impact else None,
            )
        )
    db.commit()
    logger.info("Stored %d events", len(events))
    return len(events)


def indicator_from_record(record: IndicatorRecord) -> Indicator:
    return Indicator(
        date=record.date,
        phase=record.phase,
        pillar=record.pillar,
        indicator=record.indicator,
        value=record.value,
        direction=record.direction,
        confidence=record.confidence,
        source_url=record.source_url,
        location=record.location,
    )


def event_from_record(record: EventRecord) -> Event:
    return Event(
        date=record.date,
        phase=record.phase,
        pillars=record.pillars,
        gravity=record.gravity,
        description=record.description,
        location=record.location,
        sources=record.sources,
        confidence=record.confidence,
        indicator_impact=record.indicator_impact,
    )


def list_indicators(
    db: Session,
    phase: Phase | None = None,
    pillar: Pillar | None = None,
    indicator: str | None = None,
    limit: int = DEFAULT_LIST_LIMIT,
) -> list[Indicator]:
    """Return stored indicators matching the filters, oldest first."""
    query = db.query(IndicatorRecord)
    if phase is not None:
        query = query.filter(IndicatorRecord.phase == phase.value)
    if pillar is not None:
        query = query.filter(IndicatorRecord.pillar == pillar.value)
    if indicator:
        query = query.filter(IndicatorRecord.indicator == indicator.strip())
    rows = query.order_by(IndicatorRecord.date.asc(), IndicatorRecord.id.asc()).limit(limit).all()
    return [indicator_from_record(r) for r in rows]


def list_events(
    db: Session,
    phase: Phase | None = None,
    pillar: Pillar | None = None,
    min_gravity: int | None = None,
    limit: int = DEFAULT_LIST_LIMIT,
) -> list[Event]:
    """Return stored events matching the filters, oldest first.

    pillars is a JSON list, so the pillar filter is applied after the query.
    """
    query = db.query(EventRecord)
    if phase is not None:
        query = query.filter(EventRecord.phase == phase.value)
    if min_gravity is not None:
        query = query.filter(EventRecord.gravity >= min_gravity)
    rows = query.order_by(EventRecord.date.asc(), EventRecord.id.asc()).all()
    events = [event_from_record(r) for r in rows]
    if pillar is not None:
        events = [ev for ev in events if pillar in ev.pillars]
    return events[:limit]
