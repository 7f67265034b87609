"""Scoring engine — normalization, decay, pillar/composite scores, trends, batch generation."""

from tracker.services.scoring.generate_scores import (
    generate_all_scores,
    generate_scores_for_phase,
)
from tracker.services.scoring.normalizer import (
    IndicatorKey,
    normalize_indicators_by_phase,
    normalize_value,
)
from tracker.services.scoring.scoring_constants import calculate_temporal_decay
from tracker.services.scoring.scoring_engine import (
    calculate_composite_score,
    calculate_event_penalty,
    calculate_pillar_score,
    compute_score_time_series,
    compute_scores,
    count_recent_events,
)
from tracker.services.scoring.series_writer import (
    ScoresNotFoundError,
    ScoresUnavailableError,
    build_time_series,
    get_phase_scores,
    write_time_series,
)
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

__all__ = [
    "IndicatorKey",
    "ScoresNotFoundError",
    "ScoresUnavailableError",
    "analyze_trends",
    "build_time_series",
    "calculate_acceleration",
    "calculate_composite_score",
    "calculate_deltas",
    "calculate_event_penalty",
    "calculate_pillar_score",
    "calculate_rolling_average",
    "calculate_temporal_decay",
    "calculate_velocity",
    "compute_score_time_series",
    "compute_scores",
    "count_recent_events",
    "detect_turning_points",
    "generate_all_scores",
    "generate_scores_for_phase",
    "get_phase_scores",
    "get_summary_statistics",
    "mark_turning_points",
    "normalize_indicators_by_phase",
    "normalize_value",
    "write_time_series",
]
