"""Monitoring module - Prometheus metrics for license key resolution."""

from monitoring.recorders import Metrics, track_time

__all__ = [
    "Metrics",
    "track_time",
]
