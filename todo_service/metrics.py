"""
Prometheus metrics for the todo service.

Tracks HTTP traffic, query result sizes and rejected queries.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "todo_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "todo_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

# Query metrics
query_results = Histogram(
    "todo_query_results",
    "Number of records returned by list queries",
    ["resource"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000),
)

rejected_queries_total = Counter(
    "todo_rejected_queries_total",
    "Total queries rejected because of an invalid parameter",
    ["parameter"],
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


def track_query_results(resource: str, count: int):
    """Track the size of a list query result."""
    query_results.labels(resource=resource).observe(count)


def track_rejected_query(parameter: str):
    """Track a query rejected with HTTP 400."""
    rejected_queries_total.labels(parameter=parameter).inc()


async def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
