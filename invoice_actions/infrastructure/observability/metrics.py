"""Prometheus metrics for invoice mutations and request latency"""

from prometheus_client import Counter, Histogram

# Mutation metrics
mutation_counter = Counter(
    "invoice_mutations_total",
    "Invoice form actions handled",
    ["operation", "outcome"],  # create|update|delete x success|validation_failed|persist_failed
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_mutation(operation: str, outcome: str) -> None:
    """Count one handled mutation by operation and outcome"""
    mutation_counter.labels(operation=operation, outcome=outcome).inc()
