"""
E2E tests for investor sessions driven through the HTTP API.

Investor personas:
- saver: one contract held to maturity, never reinvests
- reinvestor: rolls accrued returns into follow-up contracts
- restarter: resets mid-session and starts over
- rollover: matured principal credited back (alternate funds policy)
"""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
def test_saver_holds_single_contract_to_maturity(client: TestClient):
    """
    saver: 5000 for 3 years at 9%
    Expected: 450 per year, completed after year 3, capital returned at maturity
    """
    client.post("/v1/contracts", json={"capital": "5000", "duration": "3"})

    accrued = []
    for _ in range(3):
        data = client.post("/v1/simulation/advance").json()
        accrued.append(data["contracts"][0]["total_accrued"])

    assert accrued == [450, 900, 1350]
    assert data["contracts"][0]["status"] == "completed"
    assert data["aggregates"]["total_returned_to_client"] == 6350

    # Years past maturity add nothing
    data = client.post("/v1/simulation/advance").json()
    assert data["contracts"][0]["total_accrued"] == 1350
    assert data["available_funds"] == 1350
    assert data["simulation_year"] == 4


@pytest.mark.integration
def test_reinvestor_funds_follow_up_contract_from_returns(client: TestClient):
    """
    reinvestor: 50000 for 5 years at 12% (6000 per year)
    Expected: after one year the full 6000 can be reinvested, leaving 0
    """
    client.post("/v1/contracts", json={"capital": "50000", "duration": "5"})
    portfolio = client.post("/v1/simulation/advance").json()
    assert portfolio["can_create_contract"] is True

    too_much = client.post("/v1/contracts", json={"capital": "6001", "duration": "3"})
    assert too_much.status_code == 409

    follow_up = client.post("/v1/contracts", json={"capital": "6000", "duration": "3"})
    assert follow_up.status_code == 201
    assert follow_up.json()["annual_return"] == 540

    portfolio = client.get("/v1/portfolio").json()
    assert portfolio["available_funds"] == 0
    assert portfolio["aggregates"]["total_invested"] == 56000
    assert portfolio["aggregates"]["active_count"] == 2

    portfolio = client.post("/v1/simulation/advance").json()
    assert portfolio["available_funds"] == 6540


@pytest.mark.integration
def test_restarter_gets_clean_session(client: TestClient):
    """
    restarter: builds a portfolio, resets, then opens a large first contract
    Expected: reset clears everything; the new first contract needs no funds
    """
    client.post("/v1/contracts", json={"capital": "10000", "duration": "5"})
    client.post("/v1/simulation/advance")
    client.post("/v1/simulation/advance")

    reset = client.post("/v1/simulation/reset").json()
    assert reset["contracts"] == []
    assert reset["simulation_year"] == 0
    assert reset["available_funds"] == 0

    response = client.post("/v1/contracts", json={"capital": "100000", "duration": "15"})
    assert response.status_code == 201
    assert response.json()["annual_return"] == 16000
    assert response.json()["id"] == 2


@pytest.mark.integration
def test_rollover_credits_matured_principal(reinvesting_client: TestClient):
    """
    rollover: 10000 for 3 years at 9% with matured principal reinvested
    Expected: principal joins available funds in the completing year only
    """
    reinvesting_client.post("/v1/contracts", json={"capital": "10000", "duration": "3"})

    funds = [reinvesting_client.post("/v1/simulation/advance").json()["available_funds"] for _ in range(4)]

    assert funds == [900, 1800, 12700, 12700]
