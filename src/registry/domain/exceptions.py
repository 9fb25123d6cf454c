"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

The lookup pipeline never lets these escape: a failing lookup is captured
as a ``Failed`` outcome instead (see ``registry.domain.model.outcome``).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class RepositoryError(DomainException):
    """The storage backend could not complete an operation."""
