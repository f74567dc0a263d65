"""Prometheus metric definitions."""

from prometheus_client import Counter, Histogram

# ============================================================
# SOURCE LOOKUP METRICS
# ============================================================

LICENSE_KEY_LOOKUPS = Counter(
    "license_key_lookups_total",
    "License key lookups per source",
    ["source", "status"],
)

LOOKUP_LATENCY = Histogram(
    "license_key_lookup_latency_seconds",
    "Time to query a license key source",
    ["source"],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

# ============================================================
# RESOLUTION METRICS
# ============================================================

RESOLUTIONS = Counter(
    "license_key_resolutions_total",
    "Completed license key resolutions",
    ["outcome"],
)
