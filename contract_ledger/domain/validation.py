"""Input validation for contract drafts entered through the form"""

import math
from typing import Dict, Optional

from contract_ledger.domain.exceptions import InvalidDurationError, ValidationError
from contract_ledger.domain.models import Amount, ContractDraft, ValidatedDraft
from contract_ledger.domain.rates import MIN_CAPITAL, VALID_DURATIONS, is_valid_duration
from contract_ledger.utils.money_utils import format_euros

MIN_CAPITAL_MESSAGE = f"Minimum capital is {format_euros(MIN_CAPITAL)}"
MISSING_DURATION_MESSAGE = "Select a duration"


def is_finite_amount(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def ensure_principal(principal: Amount) -> None:
    """
    Check a principal before it is committed to a contract.

    Raises:
        ValidationError: principal is not a finite number or is below MIN_CAPITAL
    """
    if not is_finite_amount(principal) or principal < MIN_CAPITAL:
        raise ValidationError(MIN_CAPITAL_MESSAGE, {"capital": MIN_CAPITAL_MESSAGE})


def _parse_whole_number(raw: Optional[str]) -> Optional[int]:
    # Fractions are truncated: the form only ever dealt in whole euros/years
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def validate_draft(draft: ContractDraft) -> ValidatedDraft:
    """
    Validate raw form input before it reaches the ledger engine.

    Every field is checked so the caller can show all messages at once.
    Funds eligibility is not checked here: the engine owns available funds.

    Raises:
        InvalidDurationError: duration was given but is not an offered length
        ValidationError: capital missing/non-numeric/below minimum, or duration missing
    """
    errors: Dict[str, str] = {}
    invalid_duration = False

    principal = _parse_whole_number(draft.capital)
    if principal is None or principal < MIN_CAPITAL:
        errors["capital"] = MIN_CAPITAL_MESSAGE

    duration_years = None
    if draft.duration is None or not draft.duration.strip():
        errors["duration"] = MISSING_DURATION_MESSAGE
    else:
        duration_years = _parse_whole_number(draft.duration)
        if duration_years is None or not is_valid_duration(duration_years):
            invalid_duration = True
            offered = ", ".join(str(years) for years in VALID_DURATIONS)
            errors["duration"] = f"Duration must be one of {offered} years"

    if errors:
        error_cls = InvalidDurationError if invalid_duration else ValidationError
        raise error_cls.from_errors(errors)

    return ValidatedDraft(principal=principal, duration_years=duration_years)
