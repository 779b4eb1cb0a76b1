"""Order aggregate.

An Order belongs to one customer and owns its line items.  Line items
copy the unit price at creation time so later catalog changes never
reach past orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderLineItem:
    """One (product, quantity, price) entry of an order.

    ``id`` is None until the order repository persists the item.
    """

    product_id: str
    quantity: int
    unit_price: Money  # locked at order-creation time
    id: str | None = None

    @property
    def line_total(self) -> Money:
        # Money is never negative: a zero or negative quantity totals $0.00
        # even though the stock update adds the units back.
        return self.unit_price * self.quantity


@dataclass
class Order:
    """Aggregate root for placed orders.

    Instances are built by ``OrderRepository.create`` (new orders) or
    reconstituted from storage; the create-order handler does all the
    validation before that point.
    """

    id: str
    customer: Customer
    items: list[OrderLineItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result
