"""Product aggregate: one catalog entry and its stock.

Products live independently of orders. Prices change and stock moves,
but an order only ever sees the values copied at placement time.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog together with its available stock.

    Invariants:
    - ``price`` is never negative (enforced by Money)
    - ``quantity`` is always >= 0
    """

    id: str
    name: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        _check_stock(self.quantity)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def set_quantity(self, quantity: int) -> None:
        _check_stock(quantity)
        self.quantity = quantity


@dataclass(frozen=True)
class QuantityAdjustment:
    """One entry of a stock update batch: the product's new absolute quantity."""

    product_id: str
    new_quantity: int


def _check_stock(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"Stock quantity cannot be negative, got {quantity}")
