import click

from checkout.infrastructure.cli.customer_commands import customer_add
from checkout.infrastructure.cli.order_commands import order_place, order_show
from checkout.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from checkout.infrastructure.config import load_settings
from checkout.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Checkout: place storefront orders and manage the catalog."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level, json_output=settings.log_json)


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
customer.add_command(customer_add)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
