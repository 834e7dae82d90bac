"""Order aggregate.

An Order is created exactly once by the order repository and never
mutated by the placement workflow afterwards.  Stock changes happen on
the Product aggregate, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from checkout.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price of a product at order-creation time.

    Frozen: the unit price is a copy, never a live reference to the
    catalog, and is never recomputed.
    """

    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:

    id: str
    customer_id: str
    items: list[OrderLineItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        currency = self.items[0].unit_price.currency if self.items else "USD"
        result = Money.zero(currency)
        for item in self.items:
            result = result + item.line_total
        return result
