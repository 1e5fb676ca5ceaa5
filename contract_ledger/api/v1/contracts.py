"""Contract endpoints - open a contract and list the portfolio's contracts"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request

from contract_ledger.api.dependencies import get_ledger, get_request_id
from contract_ledger.api.v1.schemas import ContractSchema, CreateContractRequest
from contract_ledger.domain.exceptions import (
    ContractNotFoundError,
    InsufficientFundsError,
    InvalidDurationError,
    ValidationError,
)
from contract_ledger.domain.ledger import LedgerEngine
from contract_ledger.domain.models import ContractDraft
from contract_ledger.domain.validation import validate_draft
from contract_ledger.infrastructure.observability.logging import log_contract_created, log_contract_rejected
from contract_ledger.infrastructure.observability.metrics import (
    contract_rejections_counter,
    contracts_created_counter,
    record_portfolio,
)

router = APIRouter()


@router.post("/contracts", response_model=ContractSchema, status_code=201)
async def create_contract(
    request_body: CreateContractRequest,
    request: Request,
    ledger: LedgerEngine = Depends(get_ledger),
):
    """
    Open a new contract from form input.

    Flow:
    1. Validate the raw capital/duration values
    2. Ask the ledger to open the contract (funds check for follow-up contracts)
    3. Record metrics and logs
    """
    request_id = get_request_id(request)

    try:
        draft = validate_draft(
            ContractDraft(capital=request_body.capital, duration=request_body.duration)
        )
        contract = ledger.create_contract(draft.principal, draft.duration_years)

    except InsufficientFundsError as e:
        contract_rejections_counter.labels(reason="insufficient_funds").inc()
        log_contract_rejected(request_id, "insufficient_funds", e.errors)
        raise HTTPException(status_code=409, detail={"message": e.message, "errors": e.errors})

    except ValidationError as e:
        reason = "invalid_duration" if isinstance(e, InvalidDurationError) else "validation"
        contract_rejections_counter.labels(reason=reason).inc()
        log_contract_rejected(request_id, reason, e.errors)
        raise HTTPException(status_code=422, detail={"message": e.message, "errors": e.errors})

    contracts_created_counter.labels(duration_years=str(contract.duration_years)).inc()
    record_portfolio(ledger.snapshot())
    log_contract_created(request_id, contract, ledger.available_funds)

    return ContractSchema.from_contract(contract)


@router.get("/contracts", response_model=List[ContractSchema])
async def list_contracts(ledger: LedgerEngine = Depends(get_ledger)):
    """Contracts in the order they were opened"""
    return [ContractSchema.from_contract(c) for c in ledger.contracts]


@router.get("/contracts/{contract_id}", response_model=ContractSchema)
async def get_contract(contract_id: int, ledger: LedgerEngine = Depends(get_ledger)):
    try:
        contract = ledger.get_contract(contract_id)
    except ContractNotFoundError:
        raise HTTPException(status_code=404, detail="Contract not found")

    return ContractSchema.from_contract(contract)
