"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CustomerRepository interface -----------------------------------------

    def find_by_id(self, customer_id: str) -> Customer | None:
        return self._load().get(customer_id)

    def find_by_email(self, email: str) -> Customer | None:
        for customer in self._load().values():
            if customer.email.lower() == email.lower():
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return list(self._load().values())

    def save(self, customer: Customer) -> None:
        customers = self._load()
        customers[customer.id] = customer
        self._persist(customers)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Customer]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Customer(id=item["id"], name=item["name"], email=item["email"])
            for item in raw
        }

    def _persist(self, customers: dict[str, Customer]) -> None:
        raw = [
            {"id": c.id, "name": c.name, "email": c.email}
            for c in customers.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
