"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_decision.domain.models import Decision, DecisionOutcome

SERVICE_NAME = "loan-decision-engine"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(
    request_id: str,
    outcome: DecisionOutcome,
    requested_period: int,
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis (personal code is never logged)"""
    if isinstance(outcome, Decision):
        logging.info(
            "Decision completed",
            extra={
                "request_id": request_id,
                "step": "decision_complete",
                "outcome": "approved",
                "loan_amount": outcome.loan_amount,
                "loan_period": outcome.loan_period,
                "requested_period": requested_period,
                "duration_ms": duration_ms,
            },
        )
    else:
        logging.warning(
            "Decision rejected",
            extra={
                "request_id": request_id,
                "step": "decision_complete",
                "outcome": outcome.kind.value,
                "reason": outcome.message,
                "requested_period": requested_period,
                "duration_ms": duration_ms,
            },
        )
