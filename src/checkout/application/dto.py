"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.order import Order
from checkout.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class RequestedItem:
    """Input: one product the customer asked for, by ID."""

    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.product_id or not self.product_id.strip():
            raise ValidationError("Product ID is required")
        Quantity(self.quantity)


@dataclass(frozen=True)
class OrderRequest:
    """Input: a customer ID and the items to place, in request order.

    Each product may appear only once; ask for a larger quantity instead
    of repeating it.
    """

    customer_id: str
    items: tuple[RequestedItem, ...]

    def __post_init__(self) -> None:
        if not self.customer_id or not self.customer_id.strip():
            raise ValidationError("Customer ID is required")
        # accept any sequence from callers, store a tuple
        object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ValidationError("Order must contain at least one item")

        seen: set[str] = set()
        for item in self.items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Product '{item.product_id}' requested more than once"
                )
            seen.add(item.product_id)

    @property
    def product_ids(self) -> list[str]:
        """Requested product IDs in request order."""
        return [item.product_id for item in self.items]


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
