"""Domain-level exceptions.

Request-shape problems and missing entities are raised as subclasses of
DomainException so the CLI layer can catch them uniformly.  Placement
rejections are returned as values (see ``checkout.application.results``);
``OrderRejected`` wraps one for callers that prefer exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkout.application.results import Rejection


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderRejected(DomainException):
    """An order placement was refused; carries the rejection value."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection
