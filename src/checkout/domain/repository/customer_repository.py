"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def find_by_email(self, email: str) -> Customer | None:
        """Return the customer registered under *email*, or None."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""
