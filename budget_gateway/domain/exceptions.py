"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordNotFoundError(DomainException):
    """Record does not exist or belongs to another user"""

    pass


class InvalidRecordError(DomainException):
    """Record identifier or payload is malformed"""

    pass
