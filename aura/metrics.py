"""
Prometheus metrics for the Aura accounts data layer.

Only the network boundary is instrumented: every call to the accounts
endpoint records its latency and outcome.
"""
from typing import Optional

from prometheus_client import Counter, Histogram

# Counter: Account fetches by outcome
ACCOUNT_FETCH_TOTAL = Counter(
    "aura_account_fetch_total",
    "Total account list fetches",
    ["outcome"]  # success, http_error, timeout, connection_error, decode_error
)

# Histogram: Account fetch latency
ACCOUNT_FETCH_LATENCY = Histogram(
    "aura_account_fetch_latency_seconds",
    "Time to fetch the account list from the Aura API",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]
)


def record_account_fetch(
    success: bool, latency_seconds: float, error_type: Optional[str] = None
) -> None:
    """Record account fetch metrics."""
    ACCOUNT_FETCH_LATENCY.observe(latency_seconds)

    if success:
        ACCOUNT_FETCH_TOTAL.labels(outcome="success").inc()
    else:
        ACCOUNT_FETCH_TOTAL.labels(outcome=error_type or "unknown").inc()
