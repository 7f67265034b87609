"""Weight validation and normalization.

A weight set is valid when its components sum to 1.0 within WEIGHT_SUM_TOLERANCE.
"""

from __future__ import annotations

from typing import Any

from tracker.schemas.records import Pillar
from tracker.schemas.scores import Weights

WEIGHT_SUM_TOLERANCE: float = 0.01


class InvalidWeightsError(ValueError):
    """Raised when weights fail strict validation or cannot be normalized."""


class PresetValidationError(ValueError):
    """Raised when presets.yaml is structurally invalid.

    Subclasses ValueError so callers can catch it alongside FileNotFoundError
    without importing this class.
    """


def validate_weights(weights: Weights) -> bool:
    """Return True if the weights sum to 1.0 within tolerance."""
    return abs(weights.total() - 1.0) < WEIGHT_SUM_TOLERANCE


def normalize_weights(weights: Weights) -> Weights:
    """Return a new weight set with every component divided by the sum.

    Raises:
        InvalidWeightsError: When the weights sum to zero.
    """
    total = weights.total()
    if total <= 0:
        raise InvalidWeightsError("cannot normalize weights that sum to 0")
    return Weights(
        politics=weights.politics / total,
        media=weights.media / total,
        business=weights.business / total,
        technology=weights.technology / total,
    )


def validate_presets(data: dict[str, Any]) -> None:
    """Validate loaded presets.yaml content.

    Raises:
        PresetValidationError: When presets are missing, incomplete or do not sum to 1.
    """
    if not isinstance(data, dict):
        raise PresetValidationError("presets file must be a mapping")
    presets = data.get("presets")
    if not isinstance(presets, dict) or not presets:
        raise PresetValidationError("presets file must have a non-empty 'presets' mapping")
    if "equal" not in presets:
        raise PresetValidationError("presets must include 'equal'")

    expected = {p.value for p in Pillar}
    for name, values in presets.items():
        if not isinstance(values, dict):
            raise PresetValidationError(f"preset '{name}' must be a mapping of pillar -> weight")
        keys = set(values)
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            raise PresetValidationError(
                f"preset '{name}' must define exactly {sorted(expected)} "
                f"(missing={missing}, unexpected={extra})"
            )
        for pillar, weight in values.items():
            if not isinstance(weight, (int, float)) or isinstance(weight, bool) or weight < 0:
                raise PresetValidationError(
                    f"preset '{name}' weight for '{pillar}' must be a non-negative number"
                )
        if not validate_weights(Weights(**values)):
            raise PresetValidationError(f"preset '{name}' weights must sum to 1.0")
