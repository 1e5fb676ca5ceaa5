"""FastAPI application factory"""

from typing import Optional

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from contract_ledger.api.middleware import RequestIDMiddleware, MetricsMiddleware
from contract_ledger.api.v1 import contracts, rates, simulation
from contract_ledger.config import Settings, settings
from contract_ledger.domain.ledger import LedgerEngine
from contract_ledger.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application with a fresh ledger session"""
    app_settings = app_settings or settings

    app = FastAPI(
        title="Contract Ledger",
        description="Investment contract simulation: contracts, yearly accrual and portfolio totals",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One portfolio per application instance
    app.state.ledger = LedgerEngine(
        initial_year=app_settings.initial_simulation_year,
        reinvest_matured_principal=app_settings.reinvest_matured_principal,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(rates.router, prefix="/v1", tags=["rates"])
    app.include_router(contracts.router, prefix="/v1", tags=["contracts"])
    app.include_router(simulation.router, prefix="/v1", tags=["simulation"])

    return app


app = create_app()
