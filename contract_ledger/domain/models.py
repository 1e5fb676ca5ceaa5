"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

Amount = Union[int, float]


class ContractStatus(str, Enum):
    """Lifecycle of a contract: ACTIVE until its last year accrues, then COMPLETED for good"""

    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class Contract:
    """Investment contract with fixed principal, duration and rate"""

    id: int
    principal: Amount
    duration_years: int
    annual_rate_percent: int
    annual_return: int
    years_elapsed: int = 0
    total_accrued: Amount = 0

    @property
    def status(self) -> ContractStatus:
        if self.years_elapsed >= self.duration_years:
            return ContractStatus.COMPLETED
        return ContractStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is ContractStatus.ACTIVE

    @property
    def years_remaining(self) -> int:
        return max(self.duration_years - self.years_elapsed, 0)


@dataclass
class Portfolio:
    """Mutable session state owned by the ledger engine"""

    simulation_year: int = 0
    available_funds: Amount = 0
    contracts: List[Contract] = field(default_factory=list)


@dataclass
class ContractDraft:
    """Unvalidated form input as typed by the user"""

    capital: Optional[str] = None
    duration: Optional[str] = None


@dataclass
class ValidatedDraft:
    """Form input that passed the input validator"""

    principal: int
    duration_years: int


@dataclass
class Aggregates:
    """Portfolio totals derived from the contract list"""

    contract_count: int
    active_count: int
    completed_count: int
    total_invested: Amount
    total_accrued_returns: Amount
    total_returned_to_client: Amount


@dataclass
class PortfolioSnapshot:
    """Read-only view of the portfolio handed to the presentation layer"""

    simulation_year: int
    available_funds: Amount
    contracts: Tuple[Contract, ...]
    aggregates: Aggregates
    can_create_contract: bool
    can_advance_year: bool
