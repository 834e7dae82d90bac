"""Tagged outcomes of an order placement.

``PlaceOrderHandler.handle`` returns exactly one of these values instead
of raising, so callers branch on the outcome explicitly::

    match handler.handle(request):
        case OrderPlaced(order=order):
            ...
        case InsufficientStock(product_id=pid, requested_quantity=qty):
            ...

The four rejection kinds are business-rule refusals of the request, not
system failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from checkout.domain.exceptions import OrderRejected
from checkout.domain.model.order import Order


@dataclass(frozen=True)
class OrderPlaced:
    order: Order

    is_success: ClassVar[bool] = True

    @property
    def message(self) -> str:
        return f"Order {self.order.id} placed"


@dataclass(frozen=True)
class CustomerNotFound:
    customer_id: str

    is_success: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return f"Could not find any customer with the id '{self.customer_id}'"


@dataclass(frozen=True)
class NoProductsFound:
    product_ids: tuple[str, ...]

    is_success: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return "Could not find any products with the given ids"


@dataclass(frozen=True)
class ProductNotFound:
    product_id: str

    is_success: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return f"Could not find product '{self.product_id}'"


@dataclass(frozen=True)
class InsufficientStock:
    product_id: str
    requested_quantity: int

    is_success: ClassVar[bool] = False

    @property
    def message(self) -> str:
        return (
            f"The quantity {self.requested_quantity} is not available "
            f"for product '{self.product_id}'"
        )


Rejection = Union[CustomerNotFound, NoProductsFound, ProductNotFound, InsufficientStock]
PlacementResult = Union[OrderPlaced, Rejection]


def unwrap_placement(result: PlacementResult) -> Order:
    """Return the placed order, or raise ``OrderRejected`` for a rejection."""
    if isinstance(result, OrderPlaced):
        return result.order
    raise OrderRejected(result)
