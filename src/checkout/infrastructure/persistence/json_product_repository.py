"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from checkout.domain.exceptions import EntityNotFoundError
from checkout.domain.model.product import Product, QuantityAdjustment
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.product_repository import ProductRepository
from checkout.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        return [p for p in self._load().values() if p.id in wanted]

    def update_quantity(self, adjustments: list[QuantityAdjustment]) -> None:
        products = self._load()

        # Validate the whole batch before touching anything
        for adj in adjustments:
            if adj.product_id not in products:
                raise EntityNotFoundError(
                    f"Product with ID '{adj.product_id}' not found"
                )
        for adj in adjustments:
            products[adj.product_id].set_quantity(adj.new_quantity)

        self._persist(products)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item["quantity"],
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "quantity": p.quantity,
                }
                for p in products.values()
            ]
        )
