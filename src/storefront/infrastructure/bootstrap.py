"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from storefront.infrastructure.config import DEFAULT_DATA_DIR
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def customer_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir / "customers.json")


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def order_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonOrderRepository:
    return JsonOrderRepository(data_dir / "orders.json")
