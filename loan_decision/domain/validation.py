"""Input validation for loan decision requests"""

from loan_decision.domain.models import DecisionRules, Failure, FailureKind
from loan_decision.infrastructure.clients.personal_code import PersonalCodeService


class LoanValidator:
    """Checks a loan request against the configured bounds before any scoring runs"""

    def __init__(self, rules: DecisionRules, personal_codes: PersonalCodeService):
        self.rules = rules
        self.personal_codes = personal_codes

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> Failure | None:
        """
        Validate the personal code, loan amount and loan period, in that order.

        Returns:
            Failure for the first check that fails, None if the request is valid
        """
        if not self.personal_codes.is_valid(personal_code):
            return Failure(FailureKind.INVALID_PERSONAL_CODE, "Invalid personal ID code!")
        if not self.rules.minimum_loan_amount <= loan_amount <= self.rules.maximum_loan_amount:
            return Failure(FailureKind.INVALID_LOAN_AMOUNT, "Invalid loan amount!")
        if not self.rules.minimum_loan_period <= loan_period <= self.rules.maximum_loan_period:
            return Failure(FailureKind.INVALID_LOAN_PERIOD, "Invalid loan period!")
        return None

    def get_age_from_personal_code(self, personal_code: str) -> int:
        """
        Customer's age in whole years.

        Raises:
            MalformedPersonalCodeError: If the code cannot be parsed
        """
        return self.personal_codes.get_age(personal_code)
