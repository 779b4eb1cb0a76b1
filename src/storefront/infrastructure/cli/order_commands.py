"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
)
from storefront.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'PID1:3,PID2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
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
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<34} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<34} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<41} {dto.total:>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(settings: Settings, customer_id: str, items: str) -> None:
    """Place a new order (decrements stock)."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(settings.data_dir),
        product_repo=product_repository(settings.data_dir),
        customer_repo=customer_repository(settings.data_dir),
    )

    try:
        order = handler.handle(customer_id=customer_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} created")
    _display_order(order_to_dto(order))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings.data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    _display_order(dto)
