#!/usr/bin/env python3
"""Regenerate per-phase score documents.

Usage:
    python scripts/generate_scores.py
    python scripts/generate_scores.py --data-dir data --preset politicsHeavy

Reads <data-dir>/processed/indicators.csv and <data-dir>/events/<phase>-events.jsonl,
writes <data-dir>/processed/scores-<phase>.json. Phases without indicators are skipped.
Exits 0 when no phase failed, 1 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tracker.config import get_settings
from tracker.services.scoring.generate_scores import generate_all_scores
from tracker.weights import UnknownPresetError


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Generate per-phase score documents")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Data directory (default: DATA_DIR setting)",
    )
    parser.add_argument(
        "--preset",
        default=settings.weight_preset,
        help="Weight preset name (default: WEIGHT_PRESET setting)",
    )
    args = parser.parse_args(argv)

    try:
        result = generate_all_scores(
            args.data_dir,
            preset=args.preset,
            half_life_months=settings.decay_half_life_months,
        )
    except UnknownPresetError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(
        f"status={result['status']} "
        f"phases_generated={result['phases_generated']} "
        f"phases_skipped={result['phases_skipped']} "
        f"phases_failed={result['phases_failed']}"
    )
    if result.get("error"):
        print(f"error={result['error']}", file=sys.stderr)
    return 0 if result["phases_failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
