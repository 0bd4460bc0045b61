"""Prometheus metrics definitions"""

from prometheus_client import Counter, Histogram


# Checkout metrics
checkout_attempts = Counter(
    'checkout_attempts_total',
    'Checkout attempts by payment method and final status',
    labelnames=['method', 'status']  # SUCCESS, FAILED
)

validation_failures = Counter(
    'checkout_validation_failures_total',
    'Checkout attempts rejected by payment validation',
    labelnames=['error_kind']
)

processing_unavailable = Counter(
    'checkout_processing_unavailable_total',
    'Simulated processing outages',
    labelnames=['method']
)

processing_latency = Histogram(
    'checkout_processing_latency_seconds',
    'Time spent in simulated processing',
    buckets=[0.01, 0.1, 0.5, 1, 1.5, 2, 5]
)

fees_collected = Counter(
    'checkout_fees_collected_total',
    'Fees charged on successful checkouts',
    labelnames=['method']
)

# Transaction log metrics
transaction_log_writes = Counter(
    'transaction_log_writes_total',
    'Rows appended to the transaction file',
    labelnames=['status']  # success, failure
)

transaction_log_rows_skipped = Counter(
    'transaction_log_rows_skipped_total',
    'Malformed rows skipped while loading the transaction file'
)
