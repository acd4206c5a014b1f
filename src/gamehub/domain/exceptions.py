"""Domain-level exceptions for the storefront.

Cart and catalog rule violations subclass DomainException so the CLI can
report them uniformly. Transport failures are not domain errors; see
``gamehub.infrastructure.http.exceptions``.
"""


class DomainException(Exception):
    """Base class for all storefront domain errors."""


class ValidationError(DomainException):
    """Input could not be turned into a valid domain object, or a use case
    precondition (e.g. a non-empty cart at checkout) does not hold."""


class EntityNotFoundError(DomainException):
    """A product or order the caller referred to does not exist."""
