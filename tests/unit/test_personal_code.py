"""Unit tests for personal code parsing and age calculation"""

import pytest
from datetime import date
from loan_decision.domain.exceptions import MalformedPersonalCodeError
from loan_decision.infrastructure.clients.personal_code import PersonalCodeService
from loan_decision.utils.date_utils import years_between

from tests.personal_codes import MID_PERSONAL_CODE, REFERENCE_DATE, SENIOR_PERSONAL_CODE


def test_is_valid_accepts_well_formed_codes(personal_codes: PersonalCodeService):
    assert personal_codes.is_valid(MID_PERSONAL_CODE) is True
    assert personal_codes.is_valid(SENIOR_PERSONAL_CODE) is True


@pytest.mark.parametrize(
    "personal_code",
    [
        "49002012784",  # bad checksum
        "49002302785",  # February 30th
        "4900201278",  # too short
        "4900201278X",  # not digits
        "490020127 85",  # inner space
        "49002012785 ",  # trailing space
        "４9002012785",  # non-ASCII digit
        "",
    ],
)
def test_is_valid_rejects_malformed_codes(personal_code: str, personal_codes: PersonalCodeService):
    assert personal_codes.is_valid(personal_code) is False


def test_get_birth_date(personal_codes: PersonalCodeService):
    """Test century is taken from the first digit"""
    assert personal_codes.get_birth_date(MID_PERSONAL_CODE) == date(1990, 2, 1)
    assert personal_codes.get_birth_date("50701017921") == date(2007, 1, 1)


def test_get_birth_date_malformed(personal_codes: PersonalCodeService):
    with pytest.raises(MalformedPersonalCodeError):
        personal_codes.get_birth_date("90001010000")

    with pytest.raises(MalformedPersonalCodeError):
        personal_codes.get_birth_date("49002302785")


def test_get_age_uses_injected_date(personal_codes: PersonalCodeService):
    assert personal_codes.get_age(MID_PERSONAL_CODE) == 35
    assert personal_codes.get_age(SENIOR_PERSONAL_CODE) == 54


def test_get_age_turns_over_on_birthday():
    """Test age increments on the birthday itself, not before"""
    day_before = PersonalCodeService(today=lambda: date(2025, 5, 2))
    birthday = PersonalCodeService(today=lambda: date(2025, 5, 3))

    assert day_before.get_age(SENIOR_PERSONAL_CODE) == 54
    assert birthday.get_age(SENIOR_PERSONAL_CODE) == 55


def test_get_age_defaults_to_today():
    service = PersonalCodeService()
    assert service.get_age(MID_PERSONAL_CODE) == years_between(date(1990, 2, 1), date.today())


def test_years_between_leap_day():
    """Test a February 29th birthday counts a full year only from March 1st in common years"""
    born = date(2000, 2, 29)

    assert years_between(born, date(2025, 2, 28)) == 24
    assert years_between(born, date(2025, 3, 1)) == 25
    assert years_between(born, date(2024, 2, 29)) == 24


def test_years_between_reference_date():
    assert years_between(date(1955, 2, 1), REFERENCE_DATE) == 70
    assert years_between(date(2007, 1, 1), REFERENCE_DATE) == 18
