"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the dispatch and CLI layers can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidInputError(ValidationError):
    """The pricing engine was handed an order it cannot price."""
