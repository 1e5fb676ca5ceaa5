"""Prometheus metrics for contract creation, simulation progress and portfolio balances"""

from prometheus_client import Counter, Histogram, Gauge

from contract_ledger.domain.models import PortfolioSnapshot

# Contract metrics
contracts_created_counter = Counter(
    "ledger_contracts_created_total",
    "Total contracts opened",
    ["duration_years"],
)

contract_rejections_counter = Counter(
    "ledger_contract_rejections_total",
    "Contract creations refused by validation or funds checks",
    ["reason"],  # validation | invalid_duration | insufficient_funds
)

contracts_completed_counter = Counter(
    "ledger_contracts_completed_total",
    "Contracts that reached maturity",
)

# Simulation metrics
years_advanced_counter = Counter(
    "ledger_simulation_years_advanced_total",
    "Simulated years advanced",
)

simulation_year_gauge = Gauge(
    "ledger_simulation_year",
    "Current simulation year",
)

available_funds_gauge = Gauge(
    "ledger_available_funds",
    "Accrued returns not yet committed to a contract",
)

active_contracts_gauge = Gauge(
    "ledger_active_contracts",
    "Contracts still accruing returns",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_portfolio(snapshot: PortfolioSnapshot) -> None:
    """Mirror the current portfolio state into gauges"""
    simulation_year_gauge.set(snapshot.simulation_year)
    available_funds_gauge.set(snapshot.available_funds)
    active_contracts_gauge.set(snapshot.aggregates.active_count)


def record_year_advanced(completed_before: int, snapshot: PortfolioSnapshot) -> None:
    """Count the simulated year and any contracts it brought to maturity"""
    years_advanced_counter.inc()
    newly_completed = snapshot.aggregates.completed_count - completed_before
    if newly_completed > 0:
        contracts_completed_counter.inc(newly_completed)
    record_portfolio(snapshot)
