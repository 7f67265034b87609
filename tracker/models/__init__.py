"""SQLAlchemy models."""

from tracker.models.event_record import EventRecord
from tracker.models.indicator_record import IndicatorRecord

__all__ = [
    "EventRecord",
    "IndicatorRecord",
]
