"""IndicatorRecord model — imported raw indicator readings."""

from __future__ import annotations

import datetime

from sqlalchemy import Date, DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.session import Base


class IndicatorRecord(Base):
    """One stored indicator reading (raw value; normalization happens at scoring time)."""

    __tablename__ = "indicators"

    __table_args__ = (
        Index("ix_indicators_phase_pillar_date", "phase", "pillar", "date"),
        Index("ix_indicators_indicator", "indicator"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    phase: Mapped[str] = mapped_column(String(32), nullable=False)
    pillar: Mapped[str] = mapped_column(String(32), nullable=False)
    indicator: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    direction: Mapped[str] = mapped_column(String(16), nullable=False, default="increasing")
    confidence: Mapped[str] = mapped_column(String(16), nullable=False, default="low")
    source_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    location: Mapped[str | None] = mapped_column(String(64), nullable=True)
    ingested_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.datetime.now(datetime.UTC),
        nullable=False,
    )
