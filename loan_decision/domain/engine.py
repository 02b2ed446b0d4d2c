"""Decision engine - approved loan amount and period for a customer"""

from loan_decision.domain.exceptions import MalformedPersonalCodeError
from loan_decision.domain.models import Decision, DecisionOutcome, DecisionRules, Failure, FailureKind
from loan_decision.domain.scoring import calculate_age_factor, calculate_loan_ceiling, get_credit_modifier
from loan_decision.domain.validation import LoanValidator

NO_VALID_LOAN_MESSAGE = "No valid loan found!"


class DecisionEngine:
    """
    Computes the largest loan a customer qualifies for.

    The credit modifier comes from the last four digits of the personal code
    and is scaled by the loan period and an age factor. When the requested
    period is too short to reach the minimum loan amount, the period is
    extended one month at a time up to the configured maximum.
    """

    def __init__(self, validator: LoanValidator):
        self.validator = validator
        self.rules: DecisionRules = validator.rules

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> DecisionOutcome:
        """
        Main entry point: validate the request and find the approved loan.

        The requested amount only has to fall within bounds; the approved
        amount is the customer's ceiling for the chosen period, capped at
        maximum_loan_amount.

        Returns:
            Decision with the approved amount and (possibly extended) period,
            or the Failure that stopped the calculation
        """
        failure = self.validator.verify_inputs(personal_code, loan_amount, loan_period)
        if failure is not None:
            return failure

        credit_modifier = get_credit_modifier(personal_code, self.rules)
        if credit_modifier == 0:
            return Failure(FailureKind.NO_VALID_LOAN, NO_VALID_LOAN_MESSAGE)

        period = loan_period
        while period <= self.rules.maximum_loan_period:
            amount = self.highest_valid_loan_amount(personal_code, credit_modifier, period)
            if isinstance(amount, Failure):
                return amount
            if amount >= self.rules.minimum_loan_amount:
                return Decision(
                    loan_amount=min(self.rules.maximum_loan_amount, amount),
                    loan_period=period,
                )
            period += 1

        return Failure(FailureKind.NO_VALID_LOAN, NO_VALID_LOAN_MESSAGE)

    def highest_valid_loan_amount(self, personal_code: str, credit_modifier: int, loan_period: int) -> int | Failure:
        """Largest loan for this customer, credit modifier and period"""
        try:
            age = self.validator.get_age_from_personal_code(personal_code)
        except MalformedPersonalCodeError as e:
            return Failure(FailureKind.MALFORMED_PERSONAL_CODE, str(e))

        age_factor = calculate_age_factor(age, self.rules)
        if isinstance(age_factor, Failure):
            return age_factor

        return calculate_loan_ceiling(credit_modifier, loan_period, age_factor)
