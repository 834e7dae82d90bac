"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.order import Order, OrderLineItem


class OrderRepository(ABC):

    @abstractmethod
    def create(self, customer_id: str, items: list[OrderLineItem]) -> Order:
        """Persist a new order and return the stored representation.

        The returned order carries its generated ID and the line items as
        stored, which may be normalized by the implementation.
        """

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""
