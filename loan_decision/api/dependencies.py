"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_decision.config import Settings
from loan_decision.domain.engine import DecisionEngine
from loan_decision.domain.validation import LoanValidator
from loan_decision.infrastructure.clients.personal_code import PersonalCodeService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def build_decision_engine(app_settings: Settings) -> DecisionEngine:
    """
    Build the engine from settings.

    Raises:
        ValueError: If the configured decision rules are inconsistent
    """
    validator = LoanValidator(app_settings.decision_rules(), PersonalCodeService())
    return DecisionEngine(validator)


def get_decision_engine(request: Request) -> DecisionEngine:
    """Provide the engine built at application startup"""
    return request.app.state.decision_engine
