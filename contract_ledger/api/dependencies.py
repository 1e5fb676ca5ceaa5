"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from contract_ledger.domain.ledger import LedgerEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger(request: Request) -> LedgerEngine:
    """Provide the session's ledger engine, created once by the app factory"""
    return request.app.state.ledger
