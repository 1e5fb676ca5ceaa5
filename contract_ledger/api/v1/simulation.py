"""Simulation endpoints - portfolio state, advancing the clock and resetting the session"""

from fastapi import APIRouter, Depends, Request

from contract_ledger.api.dependencies import get_ledger, get_request_id
from contract_ledger.api.v1.schemas import PortfolioResponse
from contract_ledger.domain.ledger import LedgerEngine
from contract_ledger.infrastructure.observability.logging import log_portfolio_reset, log_year_advanced
from contract_ledger.infrastructure.observability.metrics import record_portfolio, record_year_advanced

router = APIRouter()


@router.get("/portfolio", response_model=PortfolioResponse)
async def get_portfolio(ledger: LedgerEngine = Depends(get_ledger)):
    """Contracts, aggregates, available funds and the current simulation year"""
    return PortfolioResponse.from_snapshot(ledger.snapshot())


@router.post("/simulation/advance", response_model=PortfolioResponse)
async def advance_year(request: Request, ledger: LedgerEngine = Depends(get_ledger)):
    """
    Simulate one year for every active contract.

    Returns:
        Portfolio state after the year's returns were credited
    """
    completed_before = ledger.get_aggregates().completed_count
    snapshot = ledger.advance_year()

    record_year_advanced(completed_before, snapshot)
    log_year_advanced(get_request_id(request), snapshot)

    return PortfolioResponse.from_snapshot(snapshot)


@router.post("/simulation/reset", response_model=PortfolioResponse)
async def reset(request: Request, ledger: LedgerEngine = Depends(get_ledger)):
    """Discard all contracts and restart the simulation clock"""
    discarded = ledger.get_aggregates().contract_count
    ledger.reset()

    snapshot = ledger.snapshot()
    record_portfolio(snapshot)
    log_portfolio_reset(get_request_id(request), discarded)

    return PortfolioResponse.from_snapshot(snapshot)
