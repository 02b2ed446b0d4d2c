"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MalformedPersonalCodeError(DomainException):
    """Personal code could not be parsed into a birth date"""

    pass
