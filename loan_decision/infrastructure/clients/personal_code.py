"""Estonian personal code (isikukood) parsing and validation"""

from datetime import date
from typing import Callable

from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from loan_decision.domain.exceptions import MalformedPersonalCodeError
from loan_decision.utils.date_utils import years_between


class PersonalCodeService:
    """Wraps stdnum's isikukood rules behind the interface the decision engine needs"""

    def __init__(self, today: Callable[[], date] | None = None):
        self.today = today or date.today

    def is_valid(self, personal_code: str) -> bool:
        """
        Check digits, length, embedded birth date and checksum.

        Only the canonical form is accepted: stdnum would otherwise strip
        spaces, and the segment lookup reads the raw last four characters.
        """
        if len(personal_code) != 11 or not (personal_code.isascii() and personal_code.isdigit()):
            return False
        return ik.is_valid(personal_code)

    def get_birth_date(self, personal_code: str) -> date:
        """
        Extract the birth date encoded in the first seven digits.

        Raises:
            MalformedPersonalCodeError: If the code does not encode a valid date
        """
        try:
            return ik.get_birth_date(ik.compact(personal_code))
        except (ValidationError, ValueError, IndexError) as e:
            raise MalformedPersonalCodeError(f"Cannot parse personal code: {e}") from e

    def get_age(self, personal_code: str) -> int:
        """Customer's age in whole years as of today()"""
        return years_between(self.get_birth_date(personal_code), self.today())
