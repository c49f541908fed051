"""Prometheus metrics for slab query outcomes and aggregation volume"""

from prometheus_client import Counter, Histogram

# Query metrics
slab_query_counter = Counter(
    "rate_chart_slab_query_total",
    "Slab read operations",
    ["operation", "outcome"],  # outcome: ok | not_found | unauthenticated
)

rows_aggregated_histogram = Histogram(
    "rate_chart_slab_rows_aggregated",
    "Join rows consumed per aggregation pass",
    buckets=[0, 1, 5, 10, 25, 50, 100, 250, 1000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_query(operation: str, outcome: str) -> None:
    """Count a facade call by operation and outcome"""
    slab_query_counter.labels(operation=operation, outcome=outcome).inc()
