"""Domain-specific exceptions"""

from typing import Dict, Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Capital or duration is missing, malformed or below the allowed minimum.

    ``errors`` maps each offending form field ("capital", "duration") to a
    user-facing message so the presentation layer can show them inline.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = dict(errors) if errors else {}

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationError":
        return cls("; ".join(errors.values()), errors)


class InvalidDurationError(ValidationError):
    """Duration is not one of the offered contract lengths"""

    pass


class InsufficientFundsError(DomainException):
    """Requested principal exceeds the funds accrued in the portfolio"""

    def __init__(self, message: str, requested, available):
        super().__init__(message)
        self.message = message
        self.requested = requested
        self.available = available
        self.errors = {"capital": message}


class ContractNotFoundError(DomainException):
    """No contract with the given identifier exists in the portfolio"""

    pass
