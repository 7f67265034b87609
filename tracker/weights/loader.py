"""Weight preset registry backed by presets.yaml.

The preset table is static: it is read once, validated, and cached.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from tracker.schemas.scores import Weights
from tracker.weights.validator import (
    InvalidWeightsError,
    PresetValidationError,
    normalize_weights,
    validate_presets,
    validate_weights,
)

_PRESETS_PATH = Path(__file__).parent / "presets.yaml"

DEFAULT_PRESET: str = "equal"


class UnknownPresetError(KeyError):
    """Raised when a preset name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown preset: {self.name}. Available presets: {', '.join(self.available)}"


@lru_cache(maxsize=1)
def load_presets_file() -> dict[str, Any]:
    """Load and validate presets.yaml.

    Raises:
        FileNotFoundError: If presets.yaml is missing.
        PresetValidationError: If the table is structurally invalid.
    """
    try:
        with _PRESETS_PATH.open() as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise PresetValidationError(f"Weight presets YAML is malformed: {exc}") from exc
    validate_presets(data)
    return data


@lru_cache(maxsize=1)
def list_presets() -> dict[str, Weights]:
    """Return every preset by name, in file order."""
    presets = load_presets_file()["presets"]
    return {name: Weights(**values) for name, values in presets.items()}


def list_preset_names() -> list[str]:
    return list(list_presets())


def get_preset(name: str) -> Weights:
    """Return the weights for a preset name.

    Raises:
        UnknownPresetError: If name is not a known preset; lists valid names.
    """
    presets = list_presets()
    if name not in presets:
        raise UnknownPresetError(name, list(presets))
    return presets[name]


def resolve_weights(
    preset: str | None = None,
    weights: Weights | None = None,
    strict: bool = False,
) -> Weights:
    """Pick the weight set for a scoring run.

    Explicit weights win over the preset; with neither, the default preset is
    used. Explicit weights that do not sum to 1.0 are normalized, or rejected
    with InvalidWeightsError when strict is set.
    """
    if weights is None:
        return get_preset(preset or DEFAULT_PRESET)
    if validate_weights(weights):
        return weights
    if strict:
        raise InvalidWeightsError(
            f"weights must sum to 1.0 (got {weights.total():.4f})"
        )
    return normalize_weights(weights)
