"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(settings: Settings, name: str, price: str, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings.data_dir))

    try:
        product = handler.handle(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added at {product.price} "
        f"({product.quantity} in stock)"
    )


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = product_repository(settings.data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 75)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {str(p.price):>10} {p.quantity:>8}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(settings: Settings, product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository(settings.data_dir))

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} price updated to {Money.of(price)}")
