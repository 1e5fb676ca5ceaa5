"""Unit tests for form input validation"""

import pytest
from contract_ledger.domain.exceptions import InvalidDurationError, ValidationError
from contract_ledger.domain.models import ContractDraft
from contract_ledger.domain.validation import (
    MIN_CAPITAL_MESSAGE,
    MISSING_DURATION_MESSAGE,
    ensure_principal,
    validate_draft,
)


def test_validate_draft_accepts_valid_input():
    validated = validate_draft(ContractDraft(capital="10000", duration="5"))

    assert validated.principal == 10000
    assert validated.duration_years == 5


def test_validate_draft_strips_whitespace_and_truncates_fractions():
    """Test whole-euro parsing of form text"""
    validated = validate_draft(ContractDraft(capital=" 7500.90 ", duration="8"))

    assert validated.principal == 7500
    assert validated.duration_years == 8


@pytest.mark.parametrize("capital", [None, "", "   ", "abc", "4999", "nan", "inf", "-6000"])
def test_validate_draft_rejects_bad_capital(capital):
    """Test missing, non-numeric and below-minimum capital"""
    with pytest.raises(ValidationError) as exc_info:
        validate_draft(ContractDraft(capital=capital, duration="3"))

    assert exc_info.value.errors == {"capital": MIN_CAPITAL_MESSAGE}
    assert not isinstance(exc_info.value, InvalidDurationError)


def test_validate_draft_minimum_capital_is_inclusive():
    assert validate_draft(ContractDraft(capital="5000", duration="3")).principal == 5000


def test_validate_draft_missing_duration():
    with pytest.raises(ValidationError) as exc_info:
        validate_draft(ContractDraft(capital="5000", duration=""))

    assert exc_info.value.errors == {"duration": MISSING_DURATION_MESSAGE}
    assert not isinstance(exc_info.value, InvalidDurationError)


@pytest.mark.parametrize("duration", ["4", "7", "abc", "0"])
def test_validate_draft_unoffered_duration(duration):
    with pytest.raises(InvalidDurationError) as exc_info:
        validate_draft(ContractDraft(capital="5000", duration=duration))

    assert "duration" in exc_info.value.errors


def test_validate_draft_reports_every_field():
    """Test capital and duration messages are collected together"""
    with pytest.raises(ValidationError) as exc_info:
        validate_draft(ContractDraft())

    assert exc_info.value.errors == {
        "capital": MIN_CAPITAL_MESSAGE,
        "duration": MISSING_DURATION_MESSAGE,
    }
    assert MIN_CAPITAL_MESSAGE in str(exc_info.value)


def test_minimum_capital_message_formats_amount():
    assert MIN_CAPITAL_MESSAGE == "Minimum capital is 5,000€"


@pytest.mark.parametrize("principal", [4999, 0, -5000, float("nan"), float("inf"), True, "5000", None])
def test_ensure_principal_rejects(principal):
    with pytest.raises(ValidationError):
        ensure_principal(principal)


@pytest.mark.parametrize("principal", [5000, 5000.0, 123456.78])
def test_ensure_principal_accepts(principal):
    ensure_principal(principal)
