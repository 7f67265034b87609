"""Pillar Tracker: indicator and event scoring with trend analysis."""

__version__ = "0.1.0"
