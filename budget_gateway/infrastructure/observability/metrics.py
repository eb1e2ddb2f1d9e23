"""Prometheus metrics for consult outcomes, warnings, and record activity"""

from typing import List
from prometheus_client import Counter, Histogram

from budget_gateway.domain.affordability import (
    WARNING_EXCEEDS_BUDGET,
    WARNING_HIGH_INTEREST,
    WARNING_INCOME_SHARE,
)

# Consult metrics
consult_counter = Counter(
    "budget_consult_total",
    "Total affordability consults",
    ["consult_type", "outcome"],  # expense | debt | subscription ; affordable | unaffordable
)

consult_warning_counter = Counter(
    "budget_consult_warnings_total",
    "Warnings raised by affordability consults",
    ["warning"],  # exceeds_budget | income_share | high_interest
)

# Record metrics
record_write_counter = Counter(
    "budget_record_writes_total",
    "Budget record writes",
    ["record", "operation"],  # income | expense | debt | savings_goal | category ; create | update | delete
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)

WARNING_LABELS = {
    WARNING_EXCEEDS_BUDGET: "exceeds_budget",
    WARNING_INCOME_SHARE: "income_share",
    WARNING_HIGH_INTEREST: "high_interest",
}


def record_consult(consult_type: str, can_afford: bool, warnings: List[str]) -> None:
    """Record consult outcome and the warnings it produced"""
    outcome = "affordable" if can_afford else "unaffordable"
    consult_counter.labels(consult_type=consult_type, outcome=outcome).inc()

    for warning in warnings:
        consult_warning_counter.labels(warning=WARNING_LABELS.get(warning, "other")).inc()


def record_write(record: str, operation: str) -> None:
    """Count a create/update/delete against a record kind"""
    record_write_counter.labels(record=record, operation=operation).inc()
