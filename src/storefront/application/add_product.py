"""Application service: Add Product use case."""

from __future__ import annotations

import uuid

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, quantity: int) -> Product:
        """Add a new product to the catalog with its initial stock."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")

        if self._product_repo.find_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=uuid.uuid4().hex,
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
        )
        self._product_repo.save(product)
        return product
