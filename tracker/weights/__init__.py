"""Pillar weight presets and weight validation."""

from tracker.weights.loader import (
    DEFAULT_PRESET,
    UnknownPresetError,
    get_preset,
    list_preset_names,
    list_presets,
    load_presets_file,
    resolve_weights,
)
from tracker.weights.validator import (
    InvalidWeightsError,
    PresetValidationError,
    normalize_weights,
    validate_weights,
)

__all__ = [
    "DEFAULT_PRESET",
    "InvalidWeightsError",
    "PresetValidationError",
    "UnknownPresetError",
    "get_preset",
    "list_preset_names",
    "list_presets",
    "load_presets_file",
    "normalize_weights",
    "resolve_weights",
    "validate_weights",
]
