"""Application service: Place Order use case.

The only place that coordinates the customer directory, the catalog and
the order store.  Checks run in a fixed order and stop at the first
failure; nothing is written unless every check passes.

Steps:
  1. Resolve the customer.
  2. Load the catalog entries for the requested products in one call.
  3. Every requested product must exist.
  4. Every requested quantity must be in stock.
  5. Snapshot quantities and *current* prices into line items.
  6. Persist the order.
  7. Decrement stock for what was persisted, in one batch.
"""

from __future__ import annotations

import structlog

from checkout.application.dto import OrderRequest
from checkout.application.results import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderPlaced,
    PlacementResult,
    ProductNotFound,
)
from checkout.domain.model.order import Order, OrderLineItem
from checkout.domain.model.product import Product, QuantityAdjustment
from checkout.domain.model.value_objects import Quantity
from checkout.domain.repository.customer_repository import CustomerRepository
from checkout.domain.repository.order_repository import OrderRepository
from checkout.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, request: OrderRequest) -> PlacementResult:
        """Place an order, or return the first rejection that applies.

        Each product appears at most once in *request*; ``OrderRequest``
        refuses repeated product IDs, so they never reach this method.
        Nothing derived from the stored order is computed between
        ``create`` and ``update_quantity``.
        """
        log = logger.bind(customer_id=request.customer_id)
        log.info("order.placement_started", items=len(request.items))

        rejection = self._reject_unknown_customer(request)
        if rejection is not None:
            log.info("order.rejected", reason=rejection.message)
            return rejection

        catalog = {
            product.id: product
            for product in self._product_repo.find_all_by_id(set(request.product_ids))
        }

        rejection = self._validate_against_catalog(request, catalog)
        if rejection is not None:
            log.info("order.rejected", reason=rejection.message)
            return rejection

        line_items = [
            OrderLineItem(
                product_id=item.product_id,
                quantity=Quantity(item.quantity),
                unit_price=catalog[item.product_id].price,  # <-- price snapshot
            )
            for item in request.items
        ]

        order = self._order_repo.create(request.customer_id, line_items)
        log = log.bind(order_id=order.id)
        log.info("order.created", lines=len(order.items))

        adjustments = self._adjustments_for(order, catalog)
        try:
            self._product_repo.update_quantity(adjustments)
        except Exception:
            # The order stays persisted; stock for it was never decremented.
            log.exception("order.inventory_adjustment_failed")
            raise

        log.info(
            "order.inventory_adjusted",
            adjustments={a.product_id: a.new_quantity for a in adjustments},
        )
        return OrderPlaced(order)

    # --- Validation -----------------------------------------------------------

    def _reject_unknown_customer(self, request: OrderRequest) -> CustomerNotFound | None:
        if self._customer_repo.find_by_id(request.customer_id) is None:
            return CustomerNotFound(request.customer_id)
        return None

    @staticmethod
    def _validate_against_catalog(
        request: OrderRequest,
        catalog: dict[str, Product],
    ) -> NoProductsFound | ProductNotFound | InsufficientStock | None:
        if not catalog:
            return NoProductsFound(tuple(request.product_ids))

        # Report in request order, not catalog order
        for item in request.items:
            if item.product_id not in catalog:
                return ProductNotFound(item.product_id)

        for item in request.items:
            if item.quantity > catalog[item.product_id].quantity:
                return InsufficientStock(item.product_id, item.quantity)

        return None

    # --- Inventory ------------------------------------------------------------

    @staticmethod
    def _adjustments_for(
        order: Order,
        catalog: dict[str, Product],
    ) -> list[QuantityAdjustment]:
        """New stock levels computed from the persisted line items.

        Quantities come from the catalog snapshot taken during validation,
        not from a fresh lookup.
        """
        return [
            QuantityAdjustment(
                product_id=item.product_id,
                new_quantity=catalog[item.product_id].quantity - item.quantity.value,
            )
            for item in order.items
        ]
