"""Custom Prometheus metrics for the Inbox Sentiment Labeler.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- classifier_failures_total (UNPROCESSED labels are user-visible failures)
- llm_latency_seconds (slow provider stalls the whole sequential run)
"""

from prometheus_client import Counter, Histogram

# === Classification Metrics ===

classifications_total = Counter(
    "classifications_total",
    "Total message classifications by result",
    ["result"],
)
"""
Classification counter by result.

Labels:
- result: positive, neutral, negative, unprocessed

A rising unprocessed share means the provider or credential is broken.
"""

classifier_failures_total = Counter(
    "classifier_failures_total",
    "Classifier calls resolved to UNPROCESSED or NEUTRAL by failure kind",
    ["error_type"],
)
"""
Failure counter by kind.

Labels:
- error_type: missing_credential, invalid_input, transport, timeout,
  http_error, malformed_response

Alert thresholds:
- WARN: any missing_credential (configuration problem)
- CRITICAL: http_error + transport > 20% of classifications
"""

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Chat completion latency in seconds",
    ["model", "success"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)
"""
Chat completion latency histogram.

Labels:
- model: Model name (e.g., llama-3.1-8b-instant)
- success: true (200 with valid body), false (anything else after a response)
"""

# === Label Metrics ===

labels_applied_total = Counter(
    "labels_applied_total",
    "Sentiment labels attached to threads",
    ["label"],
)
