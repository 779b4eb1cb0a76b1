"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change and stock goes down as orders are placed.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is the stock available for new orders.  It is only
    written back through ``ProductRepository.update_quantity``.
    """

    id: str
    name: str
    price: Money
    quantity: int

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price
