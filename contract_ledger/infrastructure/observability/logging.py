"""Structured JSON logging for ledger events"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from contract_ledger.config import settings
from contract_ledger.domain.models import Contract, PortfolioSnapshot


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_contract_created(request_id: str, contract: Contract, available_funds) -> None:
    logging.info(
        "Contract created",
        extra={
            "request_id": request_id,
            "step": "contract_created",
            "contract_id": contract.id,
            "principal": contract.principal,
            "duration_years": contract.duration_years,
            "annual_return": contract.annual_return,
            "available_funds": available_funds,
        },
    )


def log_contract_rejected(request_id: str, reason: str, errors: Dict[str, str]) -> None:
    logging.warning(
        "Contract rejected",
        extra={
            "request_id": request_id,
            "step": "contract_rejected",
            "reason": reason,
            "errors": errors,
        },
    )


def log_year_advanced(request_id: str, snapshot: PortfolioSnapshot) -> None:
    """Log the portfolio state right after a simulated year"""
    logging.info(
        "Simulation year advanced",
        extra={
            "request_id": request_id,
            "step": "year_advanced",
            "simulation_year": snapshot.simulation_year,
            "available_funds": snapshot.available_funds,
            "active_count": snapshot.aggregates.active_count,
            "completed_count": snapshot.aggregates.completed_count,
        },
    )


def log_portfolio_reset(request_id: str, discarded_contracts: int) -> None:
    logging.info(
        "Portfolio reset",
        extra={
            "request_id": request_id,
            "step": "portfolio_reset",
            "discarded_contracts": discarded_contracts,
        },
    )
