"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the command dispatcher can catch them uniformly and report the message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the stock on hand."""
