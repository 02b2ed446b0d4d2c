"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Reasons a loan decision can fail"""

    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    NO_VALID_LOAN = "no_valid_loan"
    AGE_RESTRICTION = "age_restriction"
    MALFORMED_PERSONAL_CODE = "malformed_personal_code"


@dataclass(frozen=True)
class Failure:
    """Terminal outcome of a request that cannot be approved"""

    kind: FailureKind
    message: str


@dataclass(frozen=True)
class Decision:
    """Approved loan amount (whole euros) and period (months)"""

    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class DecisionRules:
    """
    Bounds and modifiers applied to every loan decision.

    The age factor rises linearly from 0.5 at age_factor_rise_start to 1.0 at
    age_factor_plateau_start, stays at 1.0 until age_factor_plateau_end and
    falls back to 0.5 at age_factor_fall_end. The minimum_age/maximum_age
    cutoffs are applied before the factor is computed.
    """

    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60
    minimum_age: int = 18
    maximum_age: int = 70

    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    age_factor_rise_start: int = 19
    age_factor_plateau_start: int = 30
    age_factor_plateau_end: int = 50
    age_factor_fall_end: int = 70

    def __post_init__(self) -> None:
        if not 0 < self.minimum_loan_amount <= self.maximum_loan_amount:
            raise ValueError("Loan amount bounds must satisfy 0 < minimum <= maximum")
        if not 0 < self.minimum_loan_period <= self.maximum_loan_period:
            raise ValueError("Loan period bounds must satisfy 0 < minimum <= maximum")
        if self.minimum_age >= self.maximum_age:
            raise ValueError("minimum_age must be below maximum_age")

        modifiers = (
            self.segment_1_credit_modifier,
            self.segment_2_credit_modifier,
            self.segment_3_credit_modifier,
        )
        if any(modifier <= 0 for modifier in modifiers):
            raise ValueError("Segment credit modifiers must be positive")

        breakpoints = (
            self.age_factor_rise_start,
            self.age_factor_plateau_start,
            self.age_factor_plateau_end,
            self.age_factor_fall_end,
        )
        if any(a >= b for a, b in zip(breakpoints, breakpoints[1:])):
            raise ValueError("Age factor breakpoints must be strictly increasing")

        # Eligible ages must fall between rise start and fall end to keep the factor in [0.5, 1.0]
        if self.minimum_age + 1 < self.age_factor_rise_start:
            raise ValueError("age_factor_rise_start must not exceed minimum_age + 1")
        if self.maximum_age > self.age_factor_fall_end:
            raise ValueError("maximum_age must not exceed age_factor_fall_end")


DecisionOutcome = Decision | Failure
