"""Pillar and composite score calculators.

Reduces normalized indicators and decayed event gravity to one score per
pillar and one composite per date. Uses scoring_constants for caps, decay
and rounding. Every call takes an explicit reference_date; nothing here
reads the clock.
"""

from __future__ import annotations

import math
from datetime import date

from tracker.schemas.records import Confidence, Event, Indicator, Pillar, min_confidence
from tracker.schemas.scores import CompositeScore, Contributor, PillarScore, Weights
from tracker.services.scoring.scoring_constants import (
    CAP_EVENT_PENALTY,
    CAP_SCORE_MAX,
    DEFAULT_HALF_LIFE_MONTHS,
    EVENT_COUNT_WINDOW_MONTHS,
    GRAVITY_PENALTY_MULTIPLIER,
    TOP_CONTRIBUTORS_LIMIT,
    calculate_temporal_decay,
    months_between,
    round_half_up,
)


def _normalized(ind: Indicator) -> float:
    if ind.normalized_value is None:
        raise ValueError(
            f"indicator '{ind.indicator}' on {ind.date.isoformat()} has not been normalized"
        )
    return ind.normalized_value


def calculate_event_penalty(
    events: list[Event],
    reference_date: date,
    pillar: Pillar | None = None,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> float:
    """Return the decayed gravity penalty of events, capped at 20.

    Each qualifying event adds gravity * 2 * decay. When pillar is given,
    only events whose pillars include it qualify. Empty set ⇒ 0.
    """
    total = 0.0
    for ev in events:
        if pillar is not None and pillar not in ev.pillars:
            continue
        decay = calculate_temporal_decay(ev.date, reference_date, half_life_months)
        total += ev.gravity * GRAVITY_PENALTY_MULTIPLIER * decay
    return min(total, CAP_EVENT_PENALTY)


def count_recent_events(events: list[Event], reference_date: date) -> int:
    """Count events dated 0..24 months (inclusive) before reference_date.

    Raw volume only: no decay and no pillar filter.
    """
    count = 0
    for ev in events:
        months = months_between(ev.date, reference_date)
        if 0 <= months <= EVENT_COUNT_WINDOW_MONTHS:
            count += 1
    return count


def calculate_pillar_score(
    indicators: list[Indicator],
    pillar: Pillar,
    events: list[Event],
    reference_date: date,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> PillarScore:
    """Compute one pillar's score from its indicators plus its event penalty.

    score = min(100, mean(normalized_value) + pillar event penalty).
    uncertainty is the standard error of the mean (population variance).
    confidence is the lowest confidence among the pillar's indicators.
    """
    pillar_indicators = [ind for ind in indicators if ind.pillar == pillar]
    if not pillar_indicators:
        return PillarScore(
            pillar=pillar,
            score=0.0,
            uncertainty=0.0,
            confidence=Confidence.low,
            indicator_count=0,
            top_contributors=[],
        )

    values = [_normalized(ind) for ind in pillar_indicators]
    n = len(values)
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    standard_error = math.sqrt(variance) / math.sqrt(n)

    penalty = calculate_event_penalty(events, reference_date, pillar, half_life_months)
    score = min(CAP_SCORE_MAX, mean + penalty)

    # sorted() is stable, so ties keep input order
    ranked = sorted(pillar_indicators, key=_normalized, reverse=True)
    contributors = [
        Contributor(indicator=ind.indicator, value=_normalized(ind), weight=1 / n)
        for ind in ranked[:TOP_CONTRIBUTORS_LIMIT]
    ]

    return PillarScore(
        pillar=pillar,
        score=round_half_up(score),
        uncertainty=round_half_up(standard_error),
        confidence=min_confidence(ind.confidence for ind in pillar_indicators),
        indicator_count=n,
        top_contributors=contributors,
    )


def calculate_composite_score(
    pillar_scores: list[PillarScore],
    weights: Weights,
    events: list[Event],
    reference_date: date,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> CompositeScore:
    """Combine pillar scores into the dated composite.

    score = min(100, weighted mean of pillar scores + global event penalty).
    The global penalty covers all events regardless of pillar and is capped
    independently of the per-pillar penalties.
    """
    weighted_sum = 0.0
    uncertainty_sum = 0.0
    total_weight = 0.0
    for ps in pillar_scores:
        w = weights.for_pillar(ps.pillar)
        weighted_sum += ps.score * w
        uncertainty_sum += ps.uncertainty * w
        total_weight += w

    base = weighted_sum / total_weight if total_weight > 0 else 0.0
    uncertainty = uncertainty_sum / total_weight if total_weight > 0 else 0.0

    penalty = calculate_event_penalty(events, reference_date, None, half_life_months)
    score = min(CAP_SCORE_MAX, base + penalty)

    return CompositeScore(
        date=reference_date,
        score=round_half_up(score),
        uncertainty=round_half_up(uncertainty),
        confidence=min_confidence(ps.confidence for ps in pillar_scores),
        pillars=list(pillar_scores),
        weights=weights,
        event_penalty=round_half_up(penalty),
        event_count=count_recent_events(events, reference_date),
    )


def compute_scores(
    indicators: list[Indicator],
    events: list[Event],
    reference_date: date,
    weights: Weights,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> CompositeScore:
    """Score every pillar for reference_date and combine them."""
    pillar_scores = [
        calculate_pillar_score(indicators, pillar, events, reference_date, half_life_months)
        for pillar in Pillar
    ]
    return calculate_composite_score(
        pillar_scores, weights, events, reference_date, half_life_months
    )


def compute_score_time_series(
    indicators: list[Indicator],
    events: list[Event],
    dates: list[date],
    weights: Weights,
    half_life_months: float = DEFAULT_HALF_LIFE_MONTHS,
) -> list[CompositeScore]:
    """Return one composite per distinct date, ascending.

    Each date is scored against the full indicator and event sets; only the
    reference date (and so the event decay) varies between dates.
    """
    return [
        compute_scores(indicators, events, d, weights, half_life_months)
        for d in sorted(set(dates))
    ]
