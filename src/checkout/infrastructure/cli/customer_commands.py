"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from checkout.application.add_customer import AddCustomerHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import customer_repository


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email (must be unique).")
def customer_add(name: str, email: str) -> None:
    """Register a new customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' <{customer.email}> added")
