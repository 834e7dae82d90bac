"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.  The
product and order fakes also record the calls the placement workflow
makes so tests can assert on side effects.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from checkout.domain.model.customer import Customer
from checkout.domain.model.order import Order, OrderLineItem
from checkout.domain.model.product import Product, QuantityAdjustment
from checkout.domain.repository.customer_repository import CustomerRepository
from checkout.domain.repository.order_repository import OrderRepository
from checkout.domain.repository.product_repository import ProductRepository


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for c in customers or []:
            self._store[c.id] = c

    def find_by_id(self, customer_id: str) -> Customer | None:
        return self._store.get(customer_id)

    def find_by_email(self, email: str) -> Customer | None:
        for c in self._store.values():
            if c.email.lower() == email.lower():
                return c
        return None

    def save(self, customer: Customer) -> None:
        self._store[customer.id] = customer


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.lookups: list[set[str]] = []
        self.adjustment_calls: list[list[QuantityAdjustment]] = []

    def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        self.lookups.append(wanted)
        # Hand out copies, like a real store would
        return [dataclasses.replace(p) for p in self._store.values() if p.id in wanted]

    def update_quantity(self, adjustments: list[QuantityAdjustment]) -> None:
        self.adjustment_calls.append(list(adjustments))
        for adj in adjustments:
            self._store[adj.product_id].set_quantity(adj.new_quantity)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self._next_id = 1
        self.create_calls: list[tuple[str, list[OrderLineItem]]] = []

    def create(self, customer_id: str, items: list[OrderLineItem]) -> Order:
        self.create_calls.append((customer_id, list(items)))
        order = Order(id=f"order-{self._next_id}", customer_id=customer_id, items=list(items))
        self._next_id += 1
        self._store[order.id] = order
        return order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)
