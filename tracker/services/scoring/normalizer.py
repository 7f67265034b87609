"""Per-phase min/max normalization of raw indicator values to 0..100."""

from __future__ import annotations

from typing import NamedTuple

from tracker.schemas.records import Indicator, Phase
from tracker.services.scoring.scoring_constants import CAP_SCORE_MAX, NORMALIZED_MIDPOINT


class IndicatorKey(NamedTuple):
    """Normalization group: one indicator series within one phase."""

    phase: Phase
    indicator: str


def normalize_value(value: float, min_value: float, max_value: float) -> float:
    """Rescale value into 0..100 given its group's min and max.

    Returns 50.0 when the group has no spread (max == min).
    """
    if max_value == min_value:
        return NORMALIZED_MIDPOINT
    normalized = (value - min_value) / (max_value - min_value) * CAP_SCORE_MAX
    return max(0.0, min(CAP_SCORE_MAX, normalized))


def normalize_indicators_by_phase(indicators: list[Indicator], phase: Phase) -> list[Indicator]:
    """Return normalized copies of the indicators belonging to phase.

    Groups by (phase, indicator name), not by pillar. Indicators from other
    phases are dropped. Output keeps the input order; inputs are not mutated.
    """
    phase_indicators = [ind for ind in indicators if ind.phase == phase]

    bounds: dict[IndicatorKey, tuple[float, float]] = {}
    for ind in phase_indicators:
        key = IndicatorKey(ind.phase, ind.indicator)
        if key in bounds:
            lo, hi = bounds[key]
            bounds[key] = (min(lo, ind.value), max(hi, ind.value))
        else:
            bounds[key] = (ind.value, ind.value)

    normalized: list[Indicator] = []
    for ind in phase_indicators:
        lo, hi = bounds[IndicatorKey(ind.phase, ind.indicator)]
        normalized.append(
            ind.model_copy(update={"normalized_value": normalize_value(ind.value, lo, hi)})
        )
    return normalized
