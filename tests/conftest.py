"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_decision.api.main import create_app
from loan_decision.api.dependencies import get_decision_engine
from loan_decision.domain.engine import DecisionEngine
from loan_decision.domain.models import DecisionRules
from loan_decision.domain.validation import LoanValidator
from loan_decision.infrastructure.clients.personal_code import PersonalCodeService

from tests.personal_codes import REFERENCE_DATE


@pytest.fixture
def rules() -> DecisionRules:
    """Reference decision rules"""
    return DecisionRules()


@pytest.fixture
def personal_codes() -> PersonalCodeService:
    """Personal code service pinned to the reference date"""
    return PersonalCodeService(today=lambda: REFERENCE_DATE)


@pytest.fixture
def validator(rules: DecisionRules, personal_codes: PersonalCodeService) -> LoanValidator:
    return LoanValidator(rules, personal_codes)


@pytest.fixture
def engine(validator: LoanValidator) -> DecisionEngine:
    return DecisionEngine(validator)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the engine pinned to the reference date"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
