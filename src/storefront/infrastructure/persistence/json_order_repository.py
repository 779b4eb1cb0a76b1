"""JSON-file-backed implementation of OrderRepository.

Each stored order embeds a copy of its customer so it can be read back
without a second repository.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def create(self, customer: Customer, items: list[OrderLineItem]) -> Order:
        order = Order(
            id=uuid.uuid4().hex,
            customer=customer,
            items=[replace(item, id=uuid.uuid4().hex) for item in items],
        )
        orders = self._load_raw()
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": {
                "id": order.customer.id,
                "name": order.customer.name,
                "email": order.customer.email,
            },
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                id=i["id"],
                product_id=i["product_id"],
                quantity=i["quantity"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        c = raw["customer"]
        return Order(
            id=raw["id"],
            customer=Customer(id=c["id"], name=c["name"], email=c["email"]),
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
