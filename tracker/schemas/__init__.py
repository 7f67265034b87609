"""Pydantic schemas for records, scores and trends."""

from tracker.schemas.records import (
    Confidence,
    Direction,
    Event,
    Indicator,
    Phase,
    Pillar,
    min_confidence,
)
from tracker.schemas.scores import (
    CompositeScore,
    Contributor,
    DateRange,
    PillarScore,
    ScoreTimeSeries,
    SeriesMetadata,
    Weights,
)
from tracker.schemas.trends import Trend, TrendAnalysis, TrendLabel, TrendSummary

__all__ = [
    "CompositeScore",
    "Confidence",
    "Contributor",
    "DateRange",
    "Direction",
    "Event",
    "Indicator",
    "Phase",
    "Pillar",
    "PillarScore",
    "ScoreTimeSeries",
    "SeriesMetadata",
    "Trend",
    "TrendAnalysis",
    "TrendLabel",
    "TrendSummary",
    "Weights",
    "min_confidence",
]
