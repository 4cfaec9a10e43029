"""Domain-level exceptions.

Cart and filter operations are total and never raise. These exceptions
only surface at the edges: building Money/Product values from raw data,
loading configuration, and resolving product ids typed on the command
line. The CLI catches DomainException uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be turned into a valid domain object."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
