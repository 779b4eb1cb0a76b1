"""Tests for the JSON-file repositories (real file I/O under tmp_path)."""

import json

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductQuantity
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _products(tmp_path):
    repo = JsonProductRepository(tmp_path / "products.json")
    repo.save(Product(id="P1", name="Widget", price=Money.of("10.00"), quantity=5))
    repo.save(Product(id="P2", name="Gadget", price=Money.of("20.00"), quantity=3))
    return repo


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        JsonProductRepository(tmp_path / "nested" / "products.json")
        assert (tmp_path / "nested" / "products.json").read_text() == "[]"

    def test_find_by_id_and_name(self, tmp_path):
        repo = _products(tmp_path)
        assert repo.find_by_id("P1").price == Money.of("10.00")
        assert repo.find_by_name("gadget").id == "P2"
        assert repo.find_by_id("nope") is None

    def test_find_all_by_id_drops_unknown(self, tmp_path):
        repo = _products(tmp_path)
        found = repo.find_all_by_id(["P2", "X1", "P1"])
        assert sorted(p.id for p in found) == ["P1", "P2"]

    def test_update_quantity_batch(self, tmp_path):
        repo = _products(tmp_path)
        repo.update_quantity([ProductQuantity("P1", 3), ProductQuantity("P2", 0)])

        reloaded = JsonProductRepository(tmp_path / "products.json")
        assert reloaded.find_by_id("P1").quantity == 3
        assert reloaded.find_by_id("P2").quantity == 0

    def test_update_quantity_skips_unknown(self, tmp_path):
        repo = _products(tmp_path)
        repo.update_quantity([ProductQuantity("X1", 7)])
        assert [p.id for p in repo.list_all()] == ["P1", "P2"]

    def test_price_stored_as_string(self, tmp_path):
        _products(tmp_path)
        raw = json.loads((tmp_path / "products.json").read_text())
        assert raw[0]["price"] == "10.00"
        assert raw[0]["currency"] == "USD"


class TestJsonCustomerRepository:

    def test_save_and_find(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        repo.save(Customer(id="C1", name="Alice", email="alice@example.com"))

        reloaded = JsonCustomerRepository(tmp_path / "customers.json")
        assert reloaded.find_by_id("C1").name == "Alice"
        assert reloaded.find_by_email("ALICE@example.com").id == "C1"
        assert reloaded.find_by_id("C2") is None
        assert len(reloaded.list_all()) == 1


class TestJsonOrderRepository:

    def test_create_assigns_ids_and_round_trips(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        customer = Customer(id="C1", name="Alice", email="alice@example.com")
        order = repo.create(customer, [
            OrderLineItem(product_id="P1", quantity=2, unit_price=Money.of("10.00")),
            OrderLineItem(product_id="P2", quantity=3, unit_price=Money.of("20.00")),
        ])

        assert order.id
        assert all(item.id for item in order.items)

        loaded = JsonOrderRepository(tmp_path / "orders.json").find_by_id(order.id)
        assert loaded.customer == customer
        assert loaded.items == order.items
        assert loaded.created_at == order.created_at
        assert loaded.total == Money.of("80.00")

    def test_find_unknown(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").find_by_id("x") is None
