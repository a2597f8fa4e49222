"""
Prometheus metrics collection for moresettings

Counts validation failures, deferred bound resolutions and settings
searches so a host application can expose them next to its own metrics.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

validation_failures_total = Counter(
    name="moresettings_validation_failures_total",
    documentation="Total number of failed validation checks",
    labelnames=["rule_type", "field_name", "kind"],  # kind: invalid_type, pattern_mismatch, ...
    registry=REGISTRY,
)

bound_resolutions_total = Counter(
    name="moresettings_bound_resolutions_total",
    documentation="Total number of deferred min/max bounds computed",
    labelnames=["bound"],  # bound: min, max
    registry=REGISTRY,
)

# =======================
# SETTINGS SEARCH METRICS
# =======================

settings_searches_total = Counter(
    name="moresettings_settings_searches_total",
    documentation="Total number of settings grid searches",
    labelnames=["status"],  # status: filtered, unfiltered
    registry=REGISTRY,
)

settings_search_duration_seconds = Histogram(
    name="moresettings_settings_search_duration_seconds",
    documentation="Time spent filtering and paginating settings",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """
    Get content type for Prometheus metrics

    Returns:
        Content type string
    """
    return CONTENT_TYPE_LATEST
