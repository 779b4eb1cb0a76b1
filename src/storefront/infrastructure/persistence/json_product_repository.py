"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import (
    ProductQuantity,
    ProductRepository,
)

log = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def find_all_by_id(self, product_ids: list[str]) -> list[Product]:
        wanted = set(product_ids)
        return [p for p in self._load().values() if p.id in wanted]

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def update_quantity(self, updates: list[ProductQuantity]) -> None:
        # One read and one write for the whole batch.
        products = self._load()
        for update in updates:
            product = products.get(update.product_id)
            if product is None:
                log.warning("Skipping stock update for unknown product %s", update.product_id)
                continue
            product.quantity = update.quantity
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item.get("quantity", 0),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "quantity": p.quantity,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
