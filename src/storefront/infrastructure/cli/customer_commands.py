"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from storefront.application.create_customer import CreateCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import customer_repository
from storefront.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email (must be unique).")
@click.pass_obj
def customer_add(settings: Settings, name: str, email: str) -> None:
    """Register a new customer."""
    handler = CreateCustomerHandler(customer_repo=customer_repository(settings.data_dir))

    try:
        customer = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' <{customer.email}> added")


@click.command("list")
@click.pass_obj
def customer_list(settings: Settings) -> None:
    """List all customers."""
    customers = customer_repository(settings.data_dir).list_all()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Email'}")
    click.echo("-" * 80)
    for c in customers:
        click.echo(f"{c.id:<34} {c.name:<20} {c.email}")
