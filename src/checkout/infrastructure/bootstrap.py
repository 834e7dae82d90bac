"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from checkout.application.place_order import PlaceOrderHandler
from checkout.infrastructure.config import load_settings
from checkout.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from checkout.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from checkout.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(load_settings().data_dir / "customers.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(load_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(load_settings().data_dir / "orders.json")


def place_order_handler() -> PlaceOrderHandler:
    return PlaceOrderHandler(
        customer_repo=customer_repository(),
        product_repo=product_repository(),
        order_repo=order_repository(),
    )
