"""Scoring constants and the temporal decay function.

Centralized configuration for the scoring engine. No magic numbers inside
the engine — all values defined here.
"""

from __future__ import annotations

import math
from datetime import date

# ── Temporal decay ──────────────────────────────────────────────────────

# Event influence halves every 12 months.
DEFAULT_HALF_LIFE_MONTHS: float = 12.0
# Months are approximated as 30 days, not calendar months.
DAYS_PER_MONTH: float = 30.0

# ── Event penalty ───────────────────────────────────────────────────────

# Gravity (1–5) is scaled to penalty points: gravity * 2 * decay.
GRAVITY_PENALTY_MULTIPLIER: float = 2.0
# No combination of events may add more than this to a pillar or composite.
CAP_EVENT_PENALTY: float = 20.0

# Events counted in CompositeScore.event_count: 0..24 months before the date.
EVENT_COUNT_WINDOW_MONTHS: float = 24.0

# ── Score bounds ────────────────────────────────────────────────────────

CAP_SCORE_MAX: float = 100.0
# Normalized value when a group has no spread (single point or constant).
NORMALIZED_MIDPOINT: float = 50.0

# Top contributors reported per pillar.
TOP_CONTRIBUTORS_LIMIT: int = 3

# ── Trend thresholds ────────────────────────────────────────────────────

# |percentage change| below this is labeled "stable".
TREND_STABLE_THRESHOLD_PCT: float = 1.0
# |percentage change| at the window end must exceed this for a turning point.
TURNING_POINT_MIN_PCT: float = 5.0
DEFAULT_ROLLING_WINDOW: int = 3


def round_half_up(value: float, ndigits: int = 2) -> float:
    """Round to ndigits decimals with halves going up (toward +inf).

    Scores are rounded once, at the point a result record is built.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def months_between(earlier: date, later: date) -> float:
    """Return (later - earlier) in 30-day months. Negative when earlier is in the future."""
    return (later - earlier).days / DAYS_PER_MONTH


def calculate_temporal_decay(
    event_date: date,
    reference_date: date,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> float:
    """Return the exponential decay multiplier for an event's age.

    decay = exp(-ln(2) / half_life * months), with months in 30-day units:
    - same date: 1.0
    - one half-life old: ~0.5
    - never exactly 0 for a finite age

    Events dated after reference_date yield a multiplier above 1.0; this is
    not clamped.
    """
    if half_life_months <= 0:
        raise ValueError(f"half_life_months must be positive (got {half_life_months})")
    months = months_between(event_date, reference_date)
    lam = math.log(2) / half_life_months
    return math.exp(-lam * months)
