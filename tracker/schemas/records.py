"""Indicator and event record schemas.

Records are immutable once built: the normalizer returns copies carrying
``normalized_value`` instead of mutating its input.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, Enum):
    """Fixed analysis periods. Indicators are normalized and scored per phase."""

    post_jan6 = "post-jan6"
    trump_era = "trump-era"
    baseline = "baseline"


class Pillar(str, Enum):
    """Thematic categories an indicator or event belongs to."""

    politics = "politics"
    media = "media"
    business = "business"
    technology = "technology"


class Direction(str, Enum):
    """Whether higher raw values mean worse or better. Informational only."""

    increasing = "increasing"
    decreasing = "decreasing"


class Confidence(str, Enum):
    """Ordinal confidence: low < medium < high."""

    low = "low"
    medium = "medium"
    high = "high"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK: dict[Confidence, int] = {
    Confidence.low: 1,
    Confidence.medium: 2,
    Confidence.high: 3,
}


def min_confidence(values: Iterable[Confidence]) -> Confidence:
    """Return the lowest confidence in values, or low when there are none."""
    lowest: Confidence | None = None
    for value in values:
        if lowest is None or value.rank < lowest.rank:
            lowest = value
    return lowest if lowest is not None else Confidence.low


class Indicator(BaseModel):
    """One observed data point of a named measurement series."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    phase: Phase
    pillar: Pillar
    indicator: str = Field(..., min_length=1, max_length=255)
    value: float = Field(..., allow_inf_nan=False)
    normalized_value: Optional[float] = Field(None, ge=0, le=100)
    direction: Direction = Direction.increasing
    confidence: Confidence = Confidence.low
    source_url: str = ""
    location: Optional[str] = None


class Event(BaseModel):
    """A discrete occurrence affecting one or more pillars."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    phase: Phase
    pillars: tuple[Pillar, ...] = Field(..., min_length=1)
    gravity: int = Field(..., ge=1, le=5)
    description: str = ""
    location: Optional[str] = None
    sources: tuple[str, ...] = Field(..., min_length=1)
    confidence: Confidence = Confidence.low
    indicator_impact: Optional[tuple[str, ...]] = None
