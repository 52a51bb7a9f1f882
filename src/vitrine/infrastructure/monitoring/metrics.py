"""
Prometheus collectors for Vitrine.

Collectors are module-level so they are registered once per process;
`GET /metrics` renders the default registry.
"""

from prometheus_client import Counter, Gauge, Histogram

# Latency buckets sized for a store round-trip plus an optional S3 upload
REQUEST_LATENCY_BUCKETS = (0.005, 0.025, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 15.0)

# HTTP (labelled by route template, never by raw path)
http_requests_total = Counter(
    "vitrine_http_requests_total",
    "Requests served",
    ["method", "route", "status"],
)
http_request_duration_seconds = Histogram(
    "vitrine_http_request_duration_seconds",
    "Time spent producing a response",
    ["method", "route"],
    buckets=REQUEST_LATENCY_BUCKETS,
)
http_requests_in_progress = Gauge(
    "vitrine_http_requests_in_progress",
    "Requests currently being handled",
    ["method"],
)
http_unhandled_exceptions_total = Counter(
    "vitrine_http_unhandled_exceptions_total",
    "Exceptions that escaped every handler",
    ["route", "exception"],
)

# Sessions: event is login/refresh/rotate
auth_events_total = Counter(
    "vitrine_auth_events_total",
    "Session events by outcome",
    ["event", "outcome"],
)

# Object store: operation is upload/delete
media_operations_total = Counter(
    "vitrine_media_operations_total",
    "Object store calls by outcome",
    ["operation", "outcome"],
)
