"""Credit scoring rules - segment modifiers, age factor and loan ceiling"""

from loan_decision.domain.models import DecisionRules, Failure, FailureKind

TOO_YOUNG_MESSAGE = "Customer is too young for a loan."
TOO_OLD_MESSAGE = "Customer is too old for a loan."


def get_credit_modifier(personal_code: str, rules: DecisionRules) -> int:
    """
    Map the last four digits of the personal code to a credit modifier.

    Segments:
    - 0000-2499: Debt (modifier 0, never eligible)
    - 2500-4999: Segment 1
    - 5000-7499: Segment 2
    - 7500-9999: Segment 3
    """
    segment = int(personal_code[-4:])

    if segment < 2500:
        return 0
    elif segment < 5000:
        return rules.segment_1_credit_modifier
    elif segment < 7500:
        return rules.segment_2_credit_modifier
    return rules.segment_3_credit_modifier


def calculate_age_factor(age: int, rules: DecisionRules) -> float | Failure:
    """
    Risk multiplier in [0.5, 1.0] for the customer's age.

    Ages at or below minimum_age and at or above maximum_age are rejected
    outright. Between the cutoffs the factor rises linearly to 1.0, holds
    through the plateau and then falls linearly towards 0.5.
    """
    if age <= rules.minimum_age:
        return Failure(FailureKind.AGE_RESTRICTION, TOO_YOUNG_MESSAGE)
    if age >= rules.maximum_age:
        return Failure(FailureKind.AGE_RESTRICTION, TOO_OLD_MESSAGE)

    if age < rules.age_factor_plateau_start:
        span = rules.age_factor_plateau_start - rules.age_factor_rise_start
        return 0.5 + (age - rules.age_factor_rise_start) * (0.5 / span)
    elif age <= rules.age_factor_plateau_end:
        return 1.0

    span = rules.age_factor_fall_end - rules.age_factor_plateau_end
    return 1.0 - (age - rules.age_factor_plateau_end) * (0.5 / span)


def calculate_loan_ceiling(credit_modifier: int, loan_period: int, age_factor: float) -> int:
    """Largest loan for the given modifier, period and age factor (truncated)"""
    return int(credit_modifier * loan_period * age_factor)
