"""Domain-level exceptions.

Editing and saving documents express rule violations as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  The pricing engine never raises any of these:
bad numeric input is coerced to zero instead.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DocumentFormatError(DomainException):
    """A document file is not valid JSON or has the wrong shape."""
