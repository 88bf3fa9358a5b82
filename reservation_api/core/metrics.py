"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# HTTP metrics
http_requests = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'path', 'status']
)

http_latency = Histogram(
    'http_request_latency_seconds',
    'HTTP request latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Database metrics
db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation']  # read, write
)

# Service error metrics
service_errors = Counter(
    'service_errors_total',
    'Classified service errors',
    ['code']  # VALIDATION_FAILED, NOT_FOUND, CONFLICT, ...
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_request(method: str, path: str, status: int, duration_seconds: float):
    """Record a finished HTTP request."""
    http_requests.labels(method=method, path=path, status=str(status)).inc()
    http_latency.observe(duration_seconds)


def record_db_operation(operation: str):
    """Record database operation. Operation: read, write"""
    db_operations.labels(operation=operation).inc()


def record_service_error(code: str):
    service_errors.labels(code=code).inc()
