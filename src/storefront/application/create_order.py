"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Customer
lookup, Product lookup, Order creation and the stock update).

Nothing is written until every validation gate has passed.  The order
is persisted first and the stock update follows; the two writes are not
wrapped in a shared transaction, and two concurrent orders for the same
product can both pass the stock check.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderItemSpec
from storefront.domain.exceptions import (
    CustomerNotFoundError,
    InsufficientStockError,
    NoProductsFoundError,
    ProductsNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import (
    ProductQuantity,
    ProductRepository,
)

log = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, item_specs: list[OrderItemSpec]) -> Order:
        """Place an order for a customer.

        Steps:
        1. Resolve the customer (fail if not found).
        2. Resolve the requested products; fail if none or only some
           of them exist.
        3. Check every product has enough stock and that all of them
           are priced in one currency.
        4. Build line items with *current* prices (snapshot) and persist.
        5. Write back the decremented stock for every persisted line item.

        Not idempotent: the same request placed twice creates two orders
        and decrements stock twice.
        """
        customer = self._customer_repo.find_by_id(customer_id)
        if customer is None:
            log.info("Order rejected: unknown customer %s", customer_id)
            raise CustomerNotFoundError()

        products = self._product_repo.find_all_by_id(
            [spec.product_id for spec in item_specs]
        )
        if not products:
            log.info("Order rejected: no products resolved for customer %s", customer_id)
            raise NoProductsFoundError()

        by_id = {product.id: product for product in products}

        missing = [spec.product_id for spec in item_specs if spec.product_id not in by_id]
        if missing:
            log.info("Order rejected: unknown products %s", ", ".join(missing))
            raise ProductsNotFoundError(missing)

        short = [
            spec.product_id
            for spec in item_specs
            if not by_id[spec.product_id].has_stock_for(spec.quantity)
        ]
        if short:
            log.info("Order rejected: insufficient stock for %s", ", ".join(short))
            raise InsufficientStockError(short)

        currencies = {by_id[spec.product_id].price.currency for spec in item_specs}
        if len(currencies) > 1:
            log.info("Order rejected: mixed currencies %s", ", ".join(sorted(currencies)))
            raise ValidationError("All products in an order must share one currency")

        line_items = [
            OrderLineItem(
                product_id=spec.product_id,
                quantity=spec.quantity,
                unit_price=self._price_of(by_id, spec.product_id),  # <-- price snapshot
            )
            for spec in item_specs
        ]

        order = self._order_repo.create(customer, line_items)

        updates = [
            ProductQuantity(
                product_id=item.product_id,
                quantity=self._stock_of(by_id, item.product_id) - item.quantity,
            )
            for item in order.items
        ]
        self._product_repo.update_quantity(updates)

        log.info(
            "Order %s created for customer %s with %d line item(s)",
            order.id,
            customer.id,
            len(order.items),
        )
        return order

    # --- Lookups with zero fallback -------------------------------------------
    # The validation gates above make a miss unreachable; a miss is logged
    # and treated as zero rather than aborting an order already in flight.

    @staticmethod
    def _price_of(products: dict[str, Product], product_id: str) -> Money:
        product = products.get(product_id)
        if product is None:
            log.warning("No resolved product %s while pricing; using zero", product_id)
            return Money.zero()
        return product.price

    @staticmethod
    def _stock_of(products: dict[str, Product], product_id: str) -> int:
        product = products.get(product_id)
        if product is None:
            log.warning("No resolved product %s while updating stock; using zero", product_id)
            return 0
        return product.quantity
