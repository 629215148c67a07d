"""Prometheus metrics for classification and labeling."""

from inbox_sentiment.monitoring.metrics import (
    classifications_total,
    classifier_failures_total,
    labels_applied_total,
    llm_latency_seconds,
)

__all__ = [
    "classifications_total",
    "classifier_failures_total",
    "labels_applied_total",
    "llm_latency_seconds",
]
