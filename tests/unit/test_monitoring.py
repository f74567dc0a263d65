"""Unit tests for monitoring module."""

import pytest
from unittest.mock import MagicMock

from extension.config.configuration import Configuration
from extension.credentials import LicenseKeyResolver, SourceUnavailableError


class TestTrackTime:
    """Tests for track_time context manager."""

    def test_track_time_records_duration(self):
        """Should record elapsed time."""
        from monitoring import track_time
        import time

        with track_time() as t:
            time.sleep(0.01)

        assert t["duration"] >= 0.01
        assert t["duration"] < 0.5

    def test_track_time_handles_exception(self):
        """Should still record duration even if exception raised."""
        from monitoring import track_time

        t_result = None
        with pytest.raises(ValueError):
            with track_time() as t:
                t_result = t
                raise ValueError("test error")

        assert t_result is not None
        assert t_result["duration"] >= 0


class TestMetrics:
    """Tests for Metrics recorder."""

    def test_lookup_success_increments_counter(self):
        """Should increment the success counter for the source."""
        from monitoring.recorders import Metrics
        from monitoring.definitions import LICENSE_KEY_LOOKUPS

        initial = LICENSE_KEY_LOOKUPS.labels(
            source="test_source", status="success"
        )._value.get()
        Metrics.lookup_success("test_source", latency=0.05)
        after = LICENSE_KEY_LOOKUPS.labels(
            source="test_source", status="success"
        )._value.get()

        assert after == initial + 1

    def test_lookup_error_records_latency(self):
        """Should observe latency for failed lookups."""
        from monitoring.recorders import Metrics
        from monitoring.definitions import LOOKUP_LATENCY

        initial_sum = LOOKUP_LATENCY.labels(source="latency_test")._sum.get()
        Metrics.lookup_error("latency_test", latency=0.25)
        after_sum = LOOKUP_LATENCY.labels(source="latency_test")._sum.get()

        assert after_sum >= initial_sum + 0.25


class TestResolverMetrics:
    """Tests for metrics recorded during resolution."""

    def test_exhausted_resolution_counted(self, secrets_client, ssm_client):
        """Should count failed lookups and the exhausted outcome."""
        from monitoring.definitions import LICENSE_KEY_LOOKUPS, RESOLUTIONS

        resolver = LicenseKeyResolver(secrets_client, ssm_client)
        exhausted = RESOLUTIONS.labels(outcome="exhausted")._value.get()
        ssm_errors = LICENSE_KEY_LOOKUPS.labels(
            source="parameter_store", status="error"
        )._value.get()

        with pytest.raises(SourceUnavailableError):
            resolver.resolve(Configuration())

        assert RESOLUTIONS.labels(outcome="exhausted")._value.get() == exhausted + 1
        assert (
            LICENSE_KEY_LOOKUPS.labels(source="parameter_store", status="error")._value.get()
            == ssm_errors + 1
        )

    def test_literal_resolution_counted(self):
        """Literal override should be counted without any lookups."""
        from monitoring.definitions import RESOLUTIONS

        resolver = LicenseKeyResolver(MagicMock(), MagicMock())
        initial = RESOLUTIONS.labels(outcome="configuration")._value.get()

        resolver.resolve(Configuration(license_key="literal"))

        assert RESOLUTIONS.labels(outcome="configuration")._value.get() == initial + 1
