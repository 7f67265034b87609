"""Trend analysis over an ascending composite score series.

Deltas, turning points, rolling averages, velocity/acceleration and summary
statistics. Inputs are never mutated; flagged trends are new records.
"""

from __future__ import annotations

import math

from tracker.schemas.scores import CompositeScore, ScoreTimeSeries
from tracker.schemas.trends import Trend, TrendAnalysis, TrendLabel, TrendSummary
from tracker.services.scoring.scoring_constants import (
    DEFAULT_ROLLING_WINDOW,
    TREND_STABLE_THRESHOLD_PCT,
    TURNING_POINT_MIN_PCT,
    round_half_up,
)


def _label(change: float, delta: float) -> TrendLabel:
    if abs(change) < TREND_STABLE_THRESHOLD_PCT:
        return TrendLabel.stable
    return TrendLabel.increasing if delta > 0 else TrendLabel.decreasing


def calculate_deltas(scores: list[CompositeScore]) -> list[Trend]:
    """Return one Trend per score: change relative to the previous score.

    The first point has delta 0 and is "stable". Percentage change is 0 when
    the previous score is 0. Labels use the unrounded percentage change.
    """
    trends: list[Trend] = []
    for i, current in enumerate(scores):
        if i == 0:
            trends.append(
                Trend(date=current.date, delta=0.0, percentage_change=0.0, trend=TrendLabel.stable)
            )
            continue
        previous = scores[i - 1].score
        delta = current.score - previous
        pct = delta / previous * 100 if previous > 0 else 0.0
        trends.append(
            Trend(
                date=current.date,
                delta=round_half_up(delta),
                percentage_change=round_half_up(pct),
                trend=_label(pct, delta),
            )
        )
    return trends


def _turning_point_indices(trends: list[Trend]) -> list[int]:
    """Indices of window middles where direction reverses by more than 5%.

    For each i >= 2 the window is (i-2, i-1, i): both ends must be non-stable
    and opposite, and |percentage_change| at i must exceed the threshold.
    The middle point i-1 is the turning point.
    """
    indices: list[int] = []
    for i in range(2, len(trends)):
        before = trends[i - 2].trend
        after = trends[i].trend
        if before == after or TrendLabel.stable in (before, after):
            continue
        if abs(trends[i].percentage_change) > TURNING_POINT_MIN_PCT:
            indices.append(i - 1)
    return indices


def detect_turning_points(trends: list[Trend]) -> list[Trend]:
    """Return flagged copies of the trends that are turning points."""
    return [
        trends[i].model_copy(update={"turning_point": True})
        for i in _turning_point_indices(trends)
    ]


def mark_turning_points(trends: list[Trend]) -> list[Trend]:
    """Return the full trend list with turning points flagged."""
    flagged = set(_turning_point_indices(trends))
    return [
        t.model_copy(update={"turning_point": True}) if i in flagged else t
        for i, t in enumerate(trends)
    ]


def calculate_rolling_average(
    scores: list[CompositeScore], window_size: int = DEFAULT_ROLLING_WINDOW
) -> list[float]:
    """Centered rolling mean of scores; the window narrows at the edges."""
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1 (got {window_size})")
    n = len(scores)
    half_before = window_size // 2
    half_after = math.ceil(window_size / 2)
    averages: list[float] = []
    for i in range(n):
        window = scores[max(0, i - half_before) : min(n, i + half_after)]
        averages.append(round_half_up(sum(s.score for s in window) / len(window)))
    return averages


def calculate_velocity(trends: list[Trend]) -> list[float]:
    return [t.delta for t in trends]


def calculate_acceleration(velocities: list[float]) -> list[float]:
    """Change in velocity; 0 for the first point."""
    return [
        0.0 if i == 0 else round_half_up(velocities[i] - velocities[i - 1])
        for i in range(len(velocities))
    ]


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def get_summary_statistics(scores: list[CompositeScore]) -> TrendSummary:
    """Summarize a score series.

    median is the middle element of the sorted scores (the lower-middle one
    for even lengths). The overall trend compares the means of the two halves,
    split at n // 2, with a raw difference below 1 counting as stable.

    Raises:
        ValueError: If scores is empty.
    """
    if not scores:
        raise ValueError("cannot summarize an empty score series")
    values = [s.score for s in scores]
    n = len(values)
    mean = _mean(values)
    median = sorted(values)[(n - 1) // 2]
    std_dev = math.sqrt(sum((v - mean) ** 2 for v in values) / n)

    first_half = values[: n // 2]
    second_half = values[n // 2 :]
    if not first_half:
        trend = TrendLabel.stable
    else:
        diff = _mean(second_half) - _mean(first_half)
        if abs(diff) < TREND_STABLE_THRESHOLD_PCT:
            trend = TrendLabel.stable
        elif diff > 0:
            trend = TrendLabel.increasing
        else:
            trend = TrendLabel.decreasing

    return TrendSummary(
        mean=round_half_up(mean),
        median=round_half_up(median),
        min=round_half_up(min(values)),
        max=round_half_up(max(values)),
        std_dev=round_half_up(std_dev),
        trend=trend,
    )


def analyze_trends(
    series: ScoreTimeSeries, window_size: int = DEFAULT_ROLLING_WINDOW
) -> TrendAnalysis:
    """Derive every trend signal for a phase's score series."""
    scores = series.composite_scores
    trends = calculate_deltas(scores)
    velocity = calculate_velocity(trends)
    return TrendAnalysis(
        phase=series.metadata.phase,
        window=window_size,
        trends=mark_turning_points(trends),
        turning_points=detect_turning_points(trends),
        rolling_average=calculate_rolling_average(scores, window_size),
        velocity=velocity,
        acceleration=calculate_acceleration(velocity),
        summary=get_summary_statistics(scores),
    )
