"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductQuantity:
    """New stock level for one product."""

    product_id: str
    quantity: int


class ProductRepository(ABC):

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def find_all_by_id(self, product_ids: list[str]) -> list[Product]:
        """Return the products matching *product_ids*.

        Unknown ids are silently dropped, so the result may be shorter
        than the input.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def update_quantity(self, updates: list[ProductQuantity]) -> None:
        """Overwrite the stock level of every product in *updates*."""
