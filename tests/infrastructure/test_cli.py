"""End-to-end tests for the click command line, using a temporary data dir."""

import pytest
from click.testing import CliRunner

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    bootstrap.customer_repository(tmp_path).save(
        Customer(id="C1", name="Alice", email="alice@example.com")
    )
    products = bootstrap.product_repository(tmp_path)
    products.save(Product(id="P1", name="Widget", price=Money.of("10"), quantity=5))
    products.save(Product(id="P2", name="Gadget", price=Money.of("20"), quantity=3))
    return tmp_path


def _run(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


def test_order_create_decrements_stock(data_dir):
    result = _run(data_dir, "order", "create", "--customer", "C1", "--items", "P1:2,P2:3")

    assert result.exit_code == 0, result.output
    assert "created" in result.output
    assert "$80.00" in result.output

    products = bootstrap.product_repository(data_dir)
    assert products.find_by_id("P1").quantity == 3
    assert products.find_by_id("P2").quantity == 0


def test_order_create_unknown_products(data_dir):
    result = _run(data_dir, "order", "create", "--customer", "C1", "--items", "P1:1,X9:1")

    assert result.exit_code == 1
    assert "Could not find products: X9" in result.output
    assert bootstrap.product_repository(data_dir).find_by_id("P1").quantity == 5


def test_order_create_insufficient_stock(data_dir):
    result = _run(data_dir, "order", "create", "--customer", "C1", "--items", "P2:4")
    assert result.exit_code == 1
    assert "quantity unavailable" in result.output


def test_order_create_bad_items_format(data_dir):
    result = _run(data_dir, "order", "create", "--customer", "C1", "--items", "P1")
    assert result.exit_code == 2
    assert "Expected 'ProductId:Quantity'" in result.output


def test_order_show(data_dir):
    customer = bootstrap.customer_repository(data_dir).find_by_id("C1")
    order = bootstrap.order_repository(data_dir).create(customer, [
        OrderLineItem(product_id="P1", quantity=2, unit_price=Money.of("10")),
    ])

    result = _run(data_dir, "order", "show", "--id", order.id)
    assert result.exit_code == 0, result.output
    assert f"Order #{order.id}" in result.output
    assert "Alice" in result.output
    assert "$20.00" in result.output


def test_order_show_unknown(data_dir):
    result = _run(data_dir, "order", "show", "--id", "missing")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_customer_and_product_commands(tmp_path):
    result = _run(tmp_path, "customer", "add", "--name", "Bob", "--email", "bob@example.com")
    assert result.exit_code == 0, result.output

    result = _run(tmp_path, "customer", "add", "--name", "Bob", "--email", "bob@example.com")
    assert result.exit_code == 1
    assert "already in use" in result.output

    result = _run(tmp_path, "product", "add", "--name", "Widget", "--price", "15.00", "--quantity", "4")
    assert result.exit_code == 0, result.output

    result = _run(tmp_path, "product", "list")
    assert "Widget" in result.output
    assert "$15.00" in result.output

    product = bootstrap.product_repository(tmp_path).find_by_name("Widget")
    result = _run(tmp_path, "product", "update", "--id", product.id, "--price", "18.00")
    assert result.exit_code == 0, result.output
    assert bootstrap.product_repository(tmp_path).find_by_id(product.id).price == Money.of("18.00")

    result = _run(tmp_path, "product", "update", "--id", product.id, "--price", "29.9")
    assert result.exit_code == 0, result.output
    assert "price updated to $29.90" in result.output

    result = _run(tmp_path, "customer", "list")
    assert "bob@example.com" in result.output


def test_data_dir_from_environment(data_dir, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(data_dir))
    result = CliRunner().invoke(cli, ["product", "list"])
    assert result.exit_code == 0, result.output
    assert "Gadget" in result.output
