"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from checkout.application.dto import OrderDTO, OrderRequest, RequestedItem
from checkout.application.results import unwrap_placement
from checkout.application.show_order import ShowOrderHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import order_repository, place_order_handler


def _parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse 'p1:3,p2:5' into (product_id, quantity) pairs."""
    pairs: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        pairs.append((product_id.strip(), qty))
    return pairs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Order Total':<43} {dto.total:>20}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_place(customer_id: str, items: str) -> None:
    """Place a new order and decrement stock."""
    pairs = _parse_items(items)

    try:
        request = OrderRequest(
            customer_id=customer_id,
            items=tuple(RequestedItem(pid, qty) for pid, qty in pairs),
        )
        order = unwrap_placement(place_order_handler().handle(request))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order.id} placed")
    _display_order(OrderDTO.from_order(order))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id}")
    _display_order(dto)
