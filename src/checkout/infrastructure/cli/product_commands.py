"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from checkout.application.add_product import AddProductHandler
from checkout.application.update_product import UpdateProductHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def product_add(name: str, price: str, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added at {product.price} "
        f"({product.quantity} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name:<20} {str(p.price):>10} {p.quantity:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--quantity", default=None, type=int, help="New stock level.")
def product_update(product_id: str, price: str | None, quantity: int | None) -> None:
    """Update a product's price and/or stock level."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id, new_price=price, new_quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} now {product.price} ({product.quantity} in stock)"
    )
