"""Metrics recorder - stateless functions to record metrics."""

import time
from contextlib import contextmanager
from typing import Generator

from monitoring.definitions import LICENSE_KEY_LOOKUPS, LOOKUP_LATENCY, RESOLUTIONS


@contextmanager
def track_time() -> Generator[dict, None, None]:
    """
    Context manager to track execution time.

    Usage:
        with track_time() as t:
            do_work()
        print(t["duration"])  # seconds
    """
    result = {"duration": 0.0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["duration"] = time.perf_counter() - start


class Metrics:
    """
    Stateless metrics recorder.

    Usage:
        from monitoring import Metrics, track_time

        with track_time() as t:
            source.get_license_key(secret_id)
        Metrics.lookup_success("secrets_manager", latency=t["duration"])
    """

    @staticmethod
    def lookup_success(source: str, latency: float = None) -> None:
        """Record a source that produced a license key."""
        LICENSE_KEY_LOOKUPS.labels(source=source, status="success").inc()
        if latency:
            LOOKUP_LATENCY.labels(source=source).observe(latency)

    @staticmethod
    def lookup_error(source: str, latency: float = None) -> None:
        """Record a source that did not produce a license key."""
        LICENSE_KEY_LOOKUPS.labels(source=source, status="error").inc()
        if latency:
            LOOKUP_LATENCY.labels(source=source).observe(latency)

    @staticmethod
    def resolution(outcome: str) -> None:
        """Record the end of a resolution, labelled by winning source or 'exhausted'."""
        RESOLUTIONS.labels(outcome=outcome).inc()
