"""Ledger engine - contract creation, yearly accrual and portfolio aggregation"""

import itertools
from dataclasses import replace
from typing import Tuple

from contract_ledger.domain.exceptions import ContractNotFoundError, InsufficientFundsError
from contract_ledger.domain.models import (
    Aggregates,
    Amount,
    Contract,
    ContractStatus,
    Portfolio,
    PortfolioSnapshot,
)
from contract_ledger.domain.rates import MIN_CAPITAL, annual_rate_for, calculate_annual_return
from contract_ledger.domain.validation import ensure_principal, is_finite_amount
from contract_ledger.utils.money_utils import format_euros


class LedgerEngine:
    """
    Owns the portfolio of one simulation session.

    The first contract is funded externally. Every later contract is paid
    for out of ``available_funds``, which only grows by the returns that
    active contracts accrue each simulated year (and, when
    ``reinvest_matured_principal`` is set, by the principal of contracts
    reaching maturity).

    Callers receive copies of contracts; the portfolio is only mutated
    through the engine's operations.
    """

    def __init__(self, initial_year: int = 0, reinvest_matured_principal: bool = False):
        self.initial_year = initial_year
        self.reinvest_matured_principal = reinvest_matured_principal
        self._portfolio = Portfolio(simulation_year=initial_year)
        # Identifiers keep counting across resets so they are never reused
        self._ids = itertools.count(1)

    @property
    def contracts(self) -> Tuple[Contract, ...]:
        return tuple(replace(contract) for contract in self._portfolio.contracts)

    @property
    def simulation_year(self) -> int:
        return self._portfolio.simulation_year

    @property
    def available_funds(self) -> Amount:
        return self._portfolio.available_funds

    @property
    def is_empty(self) -> bool:
        return not self._portfolio.contracts

    def get_contract(self, contract_id: int) -> Contract:
        for contract in self._portfolio.contracts:
            if contract.id == contract_id:
                return replace(contract)
        raise ContractNotFoundError(f"Contract {contract_id} not found")

    def create_contract(self, principal: Amount, duration_years: int) -> Contract:
        """
        Open a new contract and append it to the portfolio.

        Raises:
            ValidationError: principal is not finite or below MIN_CAPITAL
            InvalidDurationError: duration is not in the rate table
            InsufficientFundsError: a follow-up contract costs more than available funds

        All checks run before any state changes. A follow-up contract larger
        than the available funds is always reported as InsufficientFundsError,
        even when it is also below the minimum.
        """
        if not is_finite_amount(principal):
            ensure_principal(principal)
        rate_percent = annual_rate_for(duration_years)

        is_first_contract = self.is_empty
        if not is_first_contract and principal > self._portfolio.available_funds:
            available = self._portfolio.available_funds
            raise InsufficientFundsError(
                f"Insufficient funds. Available from portfolio: {format_euros(available)}",
                requested=principal,
                available=available,
            )
        ensure_principal(principal)

        contract = Contract(
            id=next(self._ids),
            principal=principal,
            duration_years=duration_years,
            annual_rate_percent=rate_percent,
            annual_return=calculate_annual_return(principal, rate_percent),
        )

        if not is_first_contract:
            self._portfolio.available_funds -= principal
        self._portfolio.contracts.append(contract)

        return replace(contract)

    def advance_year(self) -> PortfolioSnapshot:
        """
        Simulate one year passing for every active contract.

        Active contracts accrue their annual return once and complete when
        their last year has elapsed. Completed contracts are left untouched.
        The clock advances even when the portfolio is empty.
        """
        returns_this_year = 0
        matured_principal = 0

        for contract in self._portfolio.contracts:
            if contract.status is ContractStatus.COMPLETED:
                continue

            contract.years_elapsed += 1
            contract.total_accrued += contract.annual_return
            returns_this_year += contract.annual_return

            if contract.status is ContractStatus.COMPLETED:
                matured_principal += contract.principal

        self._portfolio.available_funds += returns_this_year
        if self.reinvest_matured_principal:
            self._portfolio.available_funds += matured_principal
        self._portfolio.simulation_year += 1

        return self.snapshot()

    def reset(self) -> None:
        """Discard every contract and restart the clock"""
        self._portfolio = Portfolio(simulation_year=self.initial_year)

    def get_aggregates(self) -> Aggregates:
        contracts = self._portfolio.contracts
        completed = [c for c in contracts if c.status is ContractStatus.COMPLETED]

        return Aggregates(
            contract_count=len(contracts),
            active_count=len(contracts) - len(completed),
            completed_count=len(completed),
            total_invested=sum(c.principal for c in contracts),
            total_accrued_returns=sum(c.total_accrued for c in contracts),
            # Capital goes back to the client only at maturity
            total_returned_to_client=(
                sum(c.total_accrued for c in contracts) + sum(c.principal for c in completed)
            ),
        )

    def can_create_contract(self) -> bool:
        """First contract is always allowed; later ones need at least MIN_CAPITAL accrued"""
        return self.is_empty or self._portfolio.available_funds >= MIN_CAPITAL

    def snapshot(self) -> PortfolioSnapshot:
        return PortfolioSnapshot(
            simulation_year=self._portfolio.simulation_year,
            available_funds=self._portfolio.available_funds,
            contracts=self.contracts,
            aggregates=self.get_aggregates(),
            can_create_contract=self.can_create_contract(),
            can_advance_year=not self.is_empty,
        )
