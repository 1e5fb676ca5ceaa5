"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

from contract_ledger.domain.models import Contract, PortfolioSnapshot


class CreateContractRequest(BaseModel):
    """Request body for POST /v1/contracts - raw form values, checked by the input validator"""

    capital: Optional[str] = Field(None, description="Capital to invest, in euros")
    duration: Optional[str] = Field(None, description="Contract length in years")

    @field_validator("capital", "duration", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ContractSchema(BaseModel):
    """Single contract with its accrual progress"""

    id: int
    principal: Union[int, float]
    duration_years: int
    annual_rate_percent: int
    annual_return: int
    years_elapsed: int
    total_accrued: Union[int, float]
    status: str

    @classmethod
    def from_contract(cls, contract: Contract) -> "ContractSchema":
        return cls(
            id=contract.id,
            principal=contract.principal,
            duration_years=contract.duration_years,
            annual_rate_percent=contract.annual_rate_percent,
            annual_return=contract.annual_return,
            years_elapsed=contract.years_elapsed,
            total_accrued=contract.total_accrued,
            status=contract.status.value,
        )


class AggregatesSchema(BaseModel):
    contract_count: int
    active_count: int
    completed_count: int
    total_invested: Union[int, float]
    total_accrued_returns: Union[int, float]
    total_returned_to_client: Union[int, float]


class PortfolioResponse(BaseModel):
    """Response for GET /v1/portfolio and the simulation endpoints"""

    simulation_year: int
    available_funds: Union[int, float]
    can_create_contract: bool
    can_advance_year: bool
    aggregates: AggregatesSchema
    contracts: List[ContractSchema]

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "PortfolioResponse":
        aggregates = snapshot.aggregates
        return cls(
            simulation_year=snapshot.simulation_year,
            available_funds=snapshot.available_funds,
            can_create_contract=snapshot.can_create_contract,
            can_advance_year=snapshot.can_advance_year,
            aggregates=AggregatesSchema(
                contract_count=aggregates.contract_count,
                active_count=aggregates.active_count,
                completed_count=aggregates.completed_count,
                total_invested=aggregates.total_invested,
                total_accrued_returns=aggregates.total_accrued_returns,
                total_returned_to_client=aggregates.total_returned_to_client,
            ),
            contracts=[ContractSchema.from_contract(c) for c in snapshot.contracts],
        )


class DurationOption(BaseModel):
    years: int
    rate_percent: int


class RatesResponse(BaseModel):
    """Response for GET /v1/rates"""

    min_capital: int
    durations: List[DurationOption]
