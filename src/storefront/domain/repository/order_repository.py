"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem


class OrderRepository(ABC):

    @abstractmethod
    def create(self, customer: Customer, items: list[OrderLineItem]) -> Order:
        """Persist a new order and return it.

        The returned order carries the persisted line items, each with
        an ``id`` assigned by the repository.
        """

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""
