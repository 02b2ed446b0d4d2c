"""POST /v1/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_decision.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_decision.api.dependencies import get_decision_engine, get_request_id
from loan_decision.domain.engine import DecisionEngine
from loan_decision.domain.models import Decision, FailureKind
from loan_decision.infrastructure.observability.metrics import record_decision
from loan_decision.infrastructure.observability.logging import log_decision

router = APIRouter()

FAILURE_STATUS_CODES = {
    FailureKind.INVALID_PERSONAL_CODE: 400,
    FailureKind.INVALID_LOAN_AMOUNT: 400,
    FailureKind.INVALID_LOAN_PERIOD: 400,
    FailureKind.AGE_RESTRICTION: 400,
    FailureKind.MALFORMED_PERSONAL_CODE: 400,
    FailureKind.NO_VALID_LOAN: 404,
}


@router.post("/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the maximum loan a customer can get.

    Flow:
    1. Validate personal code, amount and period
    2. Find the shortest period (from the requested one) reaching the minimum amount
    3. Return the approved amount (capped at the maximum) and period

    Rejections are returned with error_message/error_kind set: 404 when no
    period yields a valid loan, 400 for every other failure.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        outcome = engine.calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=DecisionResponse(error_message="An unexpected error occurred").model_dump(),
        )

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(outcome, request_body.loan_period)
    log_decision(request_id, outcome, request_body.loan_period, duration_ms)

    if isinstance(outcome, Decision):
        return DecisionResponse(loan_amount=outcome.loan_amount, loan_period=outcome.loan_period)

    return JSONResponse(
        status_code=FAILURE_STATUS_CODES[outcome.kind],
        content=DecisionResponse(error_message=outcome.message, error_kind=outcome.kind.value).model_dump(),
    )
