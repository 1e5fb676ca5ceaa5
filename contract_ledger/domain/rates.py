"""Fixed rate table and annual return calculation for investment contracts"""

import math
from typing import Dict, List, Tuple

from contract_ledger.domain.exceptions import InvalidDurationError
from contract_ledger.domain.models import Amount

MIN_CAPITAL = 5000

# Contract length in years -> annual rate in percent
DURATION_RATES: Dict[int, int] = {
    3: 9,
    5: 12,
    8: 13,
    10: 14,
    12: 15,
    15: 16,
}

VALID_DURATIONS: Tuple[int, ...] = tuple(sorted(DURATION_RATES))


def is_valid_duration(duration_years) -> bool:
    """Check whether a contract can be opened for this many years"""
    return (
        isinstance(duration_years, int)
        and not isinstance(duration_years, bool)
        and duration_years in DURATION_RATES
    )


def annual_rate_for(duration_years: int) -> int:
    """Look up the annual rate for a contract length.

    Raises:
        InvalidDurationError: duration is not one of the offered lengths
    """
    if not is_valid_duration(duration_years):
        offered = ", ".join(str(years) for years in VALID_DURATIONS)
        message = f"Duration must be one of {offered} years"
        raise InvalidDurationError(message, {"duration": message})
    return DURATION_RATES[duration_years]


def calculate_annual_return(principal: Amount, rate_percent: int) -> int:
    """
    Compute the fixed yearly return paid by a contract.

    Requirements:
    - Linear, non-compounding: the same amount every year
    - Rounded to whole euros, halves rounded up

    Args:
        principal: Capital committed to the contract
        rate_percent: Annual rate from the rate table

    Returns:
        Annual return in whole euros

    Example:
        5000 at 9%  → 450
        5050 at 9%  → 454.5 → 455 (not 454 as round() would give)
    """
    return math.floor(principal * rate_percent / 100 + 0.5)


def duration_options() -> List[Tuple[int, int]]:
    """Offered (years, rate percent) pairs, shortest contract first"""
    return [(years, DURATION_RATES[years]) for years in VALID_DURATIONS]
