#!/usr/bin/env python3
"""Import indicator CSV and event JSONL files into the database.

Usage:
    python scripts/import_records.py
    python scripts/import_records.py --data-dir data

Creates tables if needed. Malformed rows are logged and skipped.
Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tracker.config import get_settings
from tracker.db.session import SessionLocal, init_db
from tracker.ingestion.loaders import load_events_jsonl, load_indicators_csv
from tracker.schemas.records import Phase
from tracker.services.records import store_events, store_indicators
from tracker.services.scoring.generate_scores import events_path, indicators_path


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description="Import indicators and events")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=get_settings().data_dir,
        help="Data directory (default: DATA_DIR setting)",
    )
    args = parser.parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        indicators = load_indicators_csv(indicators_path(args.data_dir))
        events = []
        for phase in Phase:
            events.extend(
                ev for ev in load_events_jsonl(events_path(args.data_dir, phase)) if ev.phase == phase
            )
        n_indicators = store_indicators(db, indicators)
        n_events = store_events(db, events)
        print(f"status=completed indicators={n_indicators} events={n_events}")
        return 0
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
