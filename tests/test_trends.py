"""Tests for trend analysis over composite score series."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from tests.factories import make_composite
from tracker.schemas.records import Phase
from tracker.schemas.trends import TrendLabel
from tracker.services.scoring.series_writer import build_time_series
from tracker.services.scoring.trends import (
    analyze_trends,
    calculate_acceleration,
    calculate_deltas,
    calculate_rolling_average,
    calculate_velocity,
    detect_turning_points,
    get_summary_statistics,
    mark_turning_points,
)

START = date(2024, 1, 1)


def _series(values: list[float]) -> list:
    return [make_composite(v, START + timedelta(days=30 * i)) for i, v in enumerate(values)]


# ── Deltas ──────────────────────────────────────────────────────────


class TestDeltas:
    def test_first_point_stable_with_zero_delta(self) -> None:
        trends = calculate_deltas(_series([42.0]))
        assert len(trends) == 1
        assert trends[0].delta == 0.0
        assert trends[0].percentage_change == 0.0
        assert trends[0].trend == TrendLabel.stable

    def test_small_change_is_stable_large_is_increasing(self) -> None:
        trends = calculate_deltas(_series([10.0, 10.05, 12.0]))
        assert [t.trend for t in trends] == [
            TrendLabel.stable,
            TrendLabel.stable,
            TrendLabel.increasing,
        ]
        assert trends[1].delta == 0.05
        assert trends[2].delta == 1.95

    def test_decrease(self) -> None:
        trends = calculate_deltas(_series([50.0, 40.0]))
        assert trends[1].delta == -10.0
        assert trends[1].percentage_change == -20.0
        assert trends[1].trend == TrendLabel.decreasing

    def test_previous_zero_gives_zero_percentage(self) -> None:
        trends = calculate_deltas(_series([0.0, 10.0]))
        assert trends[1].percentage_change == 0.0
        assert trends[1].trend == TrendLabel.stable

    def test_one_trend_per_score(self) -> None:
        scores = _series([1.0, 2.0, 3.0, 4.0])
        trends = calculate_deltas(scores)
        assert [t.date for t in trends] == [s.date for s in scores]


# ── Turning points ──────────────────────────────────────────────────


class TestTurningPoints:
    def test_reversal_flags_middle_point(self) -> None:
        trends = calculate_deltas(_series([50.0, 55.0, 60.0, 54.0, 48.0]))
        flagged = detect_turning_points(trends)
        flagged_dates = [t.date for t in flagged]
        assert trends[2].date in flagged_dates
        assert all(t.turning_point for t in flagged)
        # the first window (stable, increasing) never qualifies
        assert trends[1].date not in flagged_dates

    def test_symmetric_small_changes_not_flagged(self) -> None:
        trends = calculate_deltas(_series([50.0, 51.0, 52.0, 51.0, 50.0]))
        assert detect_turning_points(trends) == []

    def test_inputs_not_mutated(self) -> None:
        trends = calculate_deltas(_series([50.0, 55.0, 60.0, 54.0, 48.0]))
        detect_turning_points(trends)
        assert not any(t.turning_point for t in trends)

    def test_mark_keeps_full_list(self) -> None:
        trends = calculate_deltas(_series([50.0, 55.0, 60.0, 54.0, 48.0]))
        marked = mark_turning_points(trends)
        assert len(marked) == len(trends)
        assert marked[2].turning_point is True
        assert marked[0].turning_point is False

    def test_short_series_has_none(self) -> None:
        assert detect_turning_points(calculate_deltas(_series([10.0, 50.0]))) == []


# ── Rolling average, velocity, acceleration ─────────────────────────


class TestRollingAverage:
    def test_window_three_narrows_at_edges(self) -> None:
        assert calculate_rolling_average(_series([10.0, 20.0, 30.0]), 3) == [15.0, 20.0, 25.0]

    def test_window_one_is_identity(self) -> None:
        assert calculate_rolling_average(_series([10.0, 20.0, 30.0]), 1) == [10.0, 20.0, 30.0]

    def test_window_larger_than_series(self) -> None:
        assert calculate_rolling_average(_series([10.0, 20.0]), 10) == [15.0, 15.0]

    def test_invalid_window_raises(self) -> None:
        with pytest.raises(ValueError, match="window_size"):
            calculate_rolling_average(_series([10.0]), 0)


def test_velocity_and_acceleration() -> None:
    trends = calculate_deltas(_series([10.0, 15.0, 17.0, 17.0]))
    velocity = calculate_velocity(trends)
    assert velocity == [0.0, 5.0, 2.0, 0.0]
    assert calculate_acceleration(velocity) == [0.0, 5.0, -3.0, -2.0]


# ── Summary statistics ──────────────────────────────────────────────


class TestSummaryStatistics:
    def test_even_length_median_is_lower_middle(self) -> None:
        summary = get_summary_statistics(_series([40.0, 10.0, 30.0, 20.0]))
        assert summary.median == 20.0
        assert summary.mean == 25.0
        assert summary.min == 10.0
        assert summary.max == 40.0

    def test_population_std_dev(self) -> None:
        summary = get_summary_statistics(_series([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]))
        assert summary.std_dev == 2.0

    def test_overall_trend_compares_halves(self) -> None:
        assert get_summary_statistics(_series([10.0, 12.0, 20.0, 22.0])).trend == TrendLabel.increasing
        assert get_summary_statistics(_series([22.0, 20.0, 12.0, 10.0])).trend == TrendLabel.decreasing
        assert get_summary_statistics(_series([10.0, 10.5, 10.2, 10.4])).trend == TrendLabel.stable

    def test_single_point_is_stable(self) -> None:
        summary = get_summary_statistics(_series([33.0]))
        assert summary.trend == TrendLabel.stable
        assert summary.std_dev == 0.0
        assert summary.median == 33.0

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            get_summary_statistics([])


def test_analyze_trends_bundles_every_signal() -> None:
    scores = _series([50.0, 55.0, 60.0, 54.0, 48.0])
    series = build_time_series(
        Phase.trump_era,
        [s.date for s in scores],
        scores,
        last_updated=datetime(2024, 6, 1, tzinfo=UTC),
    )
    analysis = analyze_trends(series, window_size=3)
    assert analysis.phase == Phase.trump_era
    assert analysis.window == 3
    assert len(analysis.trends) == 5
    assert len(analysis.rolling_average) == 5
    assert analysis.velocity == [t.delta for t in analysis.trends]
    assert analysis.turning_points
    assert analysis.summary.max == 60.0
