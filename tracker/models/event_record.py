"""EventRecord model — imported discrete events."""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, Date, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.session import Base


class EventRecord(Base):
    """One stored event. pillars, sources and indicator_impact are JSON lists."""

    __tablename__ = "events"

    __table_args__ = (Index("ix_events_phase_date", "phase", "date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    phase: Mapped[str] = mapped_column(String(32), nullable=False)
    pillars: Mapped[list] = mapped_column(JSON, nullable=False)
    gravity: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str | None] = mapped_column(String(64), nullable=True)
    sources: Mapped[list] = mapped_column(JSON, nullable=False)
    confidence: Mapped[str] = mapped_column(String(16), nullable=False, default="low")
    indicator_impact: Mapped[list | None] = mapped_column(JSON, nullable=True)
    ingested_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.datetime.now(datetime.UTC),
        nullable=False,
    )
