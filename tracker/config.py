"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache
from pathlib import Path


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Pillar Tracker"
    debug: bool = False

    # Database (postgresql+psycopg for psycopg3; sqlite for local use and tests)
    database_url: str = "sqlite:///./tracker.db"
    db_connect_timeout: int = 10  # seconds

    # Security
    internal_job_token: str = ""  # Required for /internal/* endpoints

    # Data files: <data_dir>/processed/indicators.csv, <data_dir>/events/<phase>-events.jsonl,
    # outputs to <data_dir>/processed/scores-<phase>.json
    data_dir: Path = Path("data")

    # Scoring
    weight_preset: str = "equal"
    decay_half_life_months: float = 12.0
    trend_window: int = 3

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        raw_url = os.getenv("DATABASE_URL", self.database_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.internal_job_token = os.getenv("INTERNAL_JOB_TOKEN", "")

        self.data_dir = Path(os.getenv("DATA_DIR", str(self.data_dir)))

        self.weight_preset = os.getenv("WEIGHT_PRESET", self.weight_preset)
        self.decay_half_life_months = float(
            os.getenv("DECAY_HALF_LIFE_MONTHS", str(self.decay_half_life_months))
        )
        self.trend_window = int(os.getenv("TREND_WINDOW", str(self.trend_window)))
