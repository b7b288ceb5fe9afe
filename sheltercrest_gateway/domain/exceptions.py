"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException, ValueError):
    """Caller passed a negative amount, an unusable day of month, or malformed answers"""

    pass
