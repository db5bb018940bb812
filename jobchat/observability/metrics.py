"""
Prometheus Metrics for the messaging core.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (messages sent, shell applications created)
    - Histogram: Distribution (request latency, conversation list size)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

MESSAGES_SENT_TOTAL = Counter(
    "jobchat_messages_sent_total",
    "Total number of messages persisted",
    ["sender_role"],
)

SHELL_APPLICATIONS_TOTAL = Counter(
    "jobchat_shell_applications_created_total",
    "Applications created only to anchor a conversation",
)

CONVERSATION_LIST_SIZE = Histogram(
    "jobchat_conversation_list_size",
    "Number of conversations returned per list request",
    buckets=[0, 1, 5, 10, 25, 50, 100, 250],
)

ERRORS_TOTAL = Counter(
    "jobchat_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for jobchat_errors_total metric."""

    NOTIFICATION_FAILED = "notification_failed"
    INTERNAL = "internal"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def record_message_sent(sender_role: str):
    """Integration point: SendMessageHandler after commit"""
    MESSAGES_SENT_TOTAL.labels(sender_role=sender_role).inc()


def record_shell_application_created():
    SHELL_APPLICATIONS_TOTAL.inc()


def observe_conversation_list_size(size: int):
    CONVERSATION_LIST_SIZE.observe(size)


def record_error(error_type: str):
    ERRORS_TOTAL.labels(error_type=error_type).inc()


def get_metrics_content() -> tuple[bytes, str]:
    """Return (body, content type) for the /metrics endpoint."""
    return generate_latest(), CONTENT_TYPE_LATEST
