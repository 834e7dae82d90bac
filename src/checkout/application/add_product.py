"""Application service: Add Product use case."""

from __future__ import annotations

import uuid

import structlog

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, quantity: int) -> Product:
        """Add a new product to the catalog with its initial stock."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=str(uuid.uuid4()),
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
        )
        self._product_repo.save(product)
        logger.info("product.created", product_id=product.id, quantity=quantity)
        return product
