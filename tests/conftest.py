"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from contract_ledger.api.main import create_app
from contract_ledger.config import Settings
from contract_ledger.domain.ledger import LedgerEngine


@pytest.fixture
def ledger() -> LedgerEngine:
    """Empty ledger with the default (canonical) policy"""
    return LedgerEngine()


@pytest.fixture
def funded_ledger() -> LedgerEngine:
    """Ledger holding one 10000 / 5 year contract after one simulated year (1200 available)"""
    engine = LedgerEngine()
    engine.create_contract(10000, 5)
    engine.advance_year()
    return engine


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client backed by a fresh ledger session"""
    app = create_app(Settings(_env_file=None))
    return TestClient(app)


@pytest.fixture
def reinvesting_client() -> TestClient:
    """Test client whose ledger credits matured principal back to available funds"""
    app = create_app(Settings(_env_file=None, reinvest_matured_principal=True))
    return TestClient(app)
