"""Domain-level exceptions.

Workflow failures travel as values inside ``Failure`` (see
``ordertaking.domain.errors``).  Exceptions are kept for the two cases
that are not part of the workflow's contract: a programmer asserting a
value is valid when it is not, and a host adapter whose remote service
is unreachable.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ConstraintViolation(DomainException):
    """A value asserted to be valid broke its constraint."""


class RemoteServiceUnavailable(DomainException):
    """A collaborator could not reach the service it fronts."""

    def __init__(self, service_name: str, endpoint: str, cause: Exception) -> None:
        super().__init__(f"{service_name}: {cause}")
        self.service_name = service_name
        self.endpoint = endpoint
        self.cause = cause


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
