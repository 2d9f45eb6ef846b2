"""
Prometheus metrics collection for fieldrules

This module provides counters for validation passes and field failures,
plus a histogram of pass duration.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation passes counter
validations_total = Counter(
    name="fieldrules_validations_total",
    documentation="Total number of validation passes over an input mapping",
    labelnames=["status"],  # status: passed, failed
    registry=REGISTRY,
)

# Field failures counter
field_failures_total = Counter(
    name="fieldrules_field_failures_total",
    documentation="Total number of fields that failed validation",
    labelnames=["rule_type"],
    registry=REGISTRY,
)

# Pass duration histogram
validation_duration_seconds = Histogram(
    name="fieldrules_validation_duration_seconds",
    documentation="Time spent validating one input mapping in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
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


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_validation(failed_rule_types: list[str], duration_seconds: float) -> None:
    """
    Record the outcome of one validation pass

    Args:
        failed_rule_types: Rule type of each failed field (empty when valid)
        duration_seconds: Time the pass took
    """
    status = "failed" if failed_rule_types else "passed"
    increment_counter(validations_total, status=status)

    for rule_type in failed_rule_types:
        increment_counter(field_failures_total, rule_type=rule_type)

    validation_duration_seconds.observe(duration_seconds)
