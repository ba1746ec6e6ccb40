"""Prometheus metrics for schedule volume, loan terms, and request latency"""

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_counter = Counter(
    "loan_schedule_total",
    "Total repayment schedules computed",
    ["kind"],  # annuity | differentiated
)

term_months_histogram = Histogram(
    "loan_term_months",
    "Requested loan terms in months",
    buckets=[6, 12, 24, 36, 60, 120, 240, 360, 600],
)

domain_error_counter = Counter(
    "loan_domain_errors_total",
    "Rejected schedule requests",
    ["error"],  # InvalidParameterError | MonthOutOfRangeError
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule(kind: str, term_months: int) -> None:
    """Record a computed schedule by repayment policy and term"""
    schedule_counter.labels(kind=kind).inc()
    term_months_histogram.observe(term_months)


def record_domain_error(error: Exception) -> None:
    domain_error_counter.labels(error=type(error).__name__).inc()
