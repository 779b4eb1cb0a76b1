from pathlib import Path

import click

from storefront.infrastructure.cli.customer_commands import customer_add, customer_list
from storefront.infrastructure.cli.order_commands import order_create, order_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_LOG_LEVEL, Settings
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="STOREFRONT_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="STOREFRONT_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Storefront — place orders against a product catalog"""
    setup_logging(log_level)
    ctx.obj = Settings(data_dir=data_dir, log_level=log_level.upper())


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


# Register subcommands
customer.add_command(customer_add)
customer.add_command(customer_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_show)
