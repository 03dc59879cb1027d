"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Data-shape anomalies (missing quantities, unknown SKUs, dangling purchase
order links) are never raised; they are absorbed by the engine.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class MissingIdentityError(ValidationError):
    """A purchase return was submitted with neither an id nor a return number."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
