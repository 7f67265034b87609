"""Pillar, composite and time-series score schemas.

These are the shapes persisted in ``scores-<phase>.json`` and served by
``GET /api/scores``.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from tracker.schemas.records import Confidence, Phase, Pillar


class Contributor(BaseModel):
    """An indicator's contribution to its pillar score."""

    model_config = ConfigDict(frozen=True)

    indicator: str
    value: float
    weight: float


class PillarScore(BaseModel):
    """Score for one pillar with uncertainty (standard error) and confidence."""

    model_config = ConfigDict(frozen=True)

    pillar: Pillar
    score: float = Field(..., ge=0, le=100)
    uncertainty: float = Field(..., ge=0)
    confidence: Confidence
    indicator_count: int = Field(..., ge=0)
    top_contributors: list[Contributor] = Field(default_factory=list, max_length=3)


class Weights(BaseModel):
    """One non-negative weight per pillar."""

    model_config = ConfigDict(frozen=True)

    politics: float = Field(..., ge=0)
    media: float = Field(..., ge=0)
    business: float = Field(..., ge=0)
    technology: float = Field(..., ge=0)

    def for_pillar(self, pillar: Pillar) -> float:
        return getattr(self, pillar.value)

    def total(self) -> float:
        return self.politics + self.media + self.business + self.technology


class CompositeScore(BaseModel):
    """One date's weighted, penalty-adjusted score across all pillars."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    score: float = Field(..., ge=0, le=100)
    uncertainty: float = Field(..., ge=0)
    confidence: Confidence
    pillars: list[PillarScore]
    weights: Weights
    event_penalty: float = Field(..., ge=0, le=20)
    event_count: int = Field(..., ge=0)


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date


class SeriesMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: Phase
    date_range: DateRange
    last_updated: datetime.datetime


class ScoreTimeSeries(BaseModel):
    """A phase's composite scores, one per evaluation date, ascending."""

    model_config = ConfigDict(frozen=True)

    dates: list[datetime.date]
    composite_scores: list[CompositeScore]
    metadata: SeriesMetadata
