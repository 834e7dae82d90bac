"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from checkout.domain.model.product import Product, QuantityAdjustment


class ProductRepository(ABC):

    @abstractmethod
    def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        """Return the products matching *product_ids*.

        Unknown ids are simply absent from the result, not errors.
        """

    @abstractmethod
    def update_quantity(self, adjustments: list[QuantityAdjustment]) -> None:
        """Apply a batch of absolute stock quantities in one operation."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
