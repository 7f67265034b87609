"""Trend analysis schemas (deltas, turning points, summary statistics)."""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from tracker.schemas.records import Phase


class TrendLabel(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"


class Trend(BaseModel):
    """Change of one date's composite score relative to the previous date."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    delta: float
    percentage_change: float
    trend: TrendLabel
    turning_point: bool = False


class TrendSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    median: float
    min: float
    max: float
    std_dev: float
    trend: TrendLabel


class TrendAnalysis(BaseModel):
    """Everything the trend endpoint derives from one phase's score series."""

    phase: Phase
    window: int
    trends: list[Trend]
    turning_points: list[Trend]
    rolling_average: list[float]
    velocity: list[float]
    acceleration: list[float]
    summary: TrendSummary
