"""Prometheus metrics for monitoring approval rates, approved amounts and period extensions"""

from prometheus_client import Counter, Histogram

from loan_decision.domain.models import Decision, DecisionOutcome

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | <failure kind>
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-4999, 5000-7499, 7500-10000
)

period_extension_histogram = Histogram(
    "loan_period_extension_months",
    "Months added to the requested period to reach the minimum loan amount",
    buckets=[0, 1, 3, 6, 12, 24, 48],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: DecisionOutcome, requested_period: int) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    if not isinstance(outcome, Decision):
        decision_counter.labels(outcome=outcome.kind.value).inc()
        return

    decision_counter.labels(outcome="approved").inc()
    period_extension_histogram.observe(outcome.loan_period - requested_period)

    # Bucket approved amounts for distribution analysis
    if outcome.loan_amount < 5000:
        bucket = "2000-4999"
    elif outcome.loan_amount < 7500:
        bucket = "5000-7499"
    else:
        bucket = "7500-10000"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
