"""Application service: Update Product use case."""

from __future__ import annotations

from checkout.domain.exceptions import EntityNotFoundError, ValidationError
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_quantity: int | None = None,
    ) -> Product:
        """Change a product's price and/or stock level.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        if new_price is None and new_quantity is None:
            raise ValidationError("Nothing to update: give a price or a quantity")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price, product.price.currency))
        if new_quantity is not None:
            product.set_quantity(new_quantity)

        self._product_repo.save(product)
        return product
