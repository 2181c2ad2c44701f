"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from freshcart.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {
        "FRESHCART_DATA_DIR": str(tmp_path),
        "FRESHCART_CHECKOUT_DELAY": "0",
        "FRESHCART_CHECKOUT_FAILURE_RATE": "0",
        "FRESHCART_PERSIST_CART": "true",
    }

    def invoke(*args, extra_env=None):
        return runner.invoke(cli, list(args), env={**env, **(extra_env or {})})

    return invoke


def _seed(run):
    assert run("product", "add", "--name", "Apples", "--price", "4.99", "--stock", "40").exit_code == 0
    assert run("product", "add", "--name", "Figs", "--price", "6.50").exit_code == 0


class TestProductCommands:

    def test_add_and_list(self, run):
        _seed(run)
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Apples" in result.output
        assert "out-of-stock" in result.output

    def test_duplicate_product_fails(self, run):
        _seed(run)
        result = run("product", "add", "--name", "apples", "--price", "1")
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_upload_image(self, run, tmp_path):
        _seed(run)
        image = tmp_path / "apple.png"
        image.write_bytes(b"\x89PNG")
        result = run("product", "upload-image", "--id", "1", str(image))
        assert result.exit_code == 0, result.output
        assert "apple.png" in result.output
        assert "Image:" in run("product", "show", "--id", "1").output


class TestCartCommands:

    def test_cart_persists_between_invocations(self, run):
        _seed(run)
        run("cart", "add", "--product", "Apples")
        run("cart", "add", "--product", "1")
        result = run("cart", "show")
        assert result.exit_code == 0
        assert "$9.98" in result.output

    def test_out_of_stock_add_fails(self, run):
        _seed(run)
        result = run("cart", "add", "--product", "Figs")
        assert result.exit_code != 0
        assert "out of stock" in result.output

    def test_set_quantity_and_remove(self, run):
        _seed(run)
        run("cart", "add", "--product", "Apples")
        assert "$24.95" in run("cart", "set", "--id", "1", "--quantity", "5").output
        run("cart", "set", "--id", "1", "--quantity", "0")
        assert "empty" in run("cart", "show").output

    def test_checkout_prints_receipt_and_records_order(self, run, tmp_path):
        _seed(run)
        run("cart", "add", "--product", "Apples")
        run("cart", "add", "--product", "Apples")

        result = run("cart", "checkout", "--phone", "555-0100")

        assert result.exit_code == 0, result.output
        assert "TOTAL" in result.output
        assert "$9.98" in result.output
        assert "empty" in run("cart", "show").output
        orders = json.loads((tmp_path / "orders.json").read_text())
        assert orders[0]["total_amount"] == "9.98"
        assert orders[0]["status"] == "pending"

    def test_failed_checkout_keeps_cart(self, run):
        _seed(run)
        run("cart", "add", "--product", "Apples")

        result = run("cart", "checkout", extra_env={"FRESHCART_CHECKOUT_FAILURE_RATE": "1"})

        assert result.exit_code != 0
        assert "$4.99" in run("cart", "show").output

    def test_checkout_empty_cart(self, run):
        result = run("cart", "checkout")
        assert result.exit_code != 0
        assert "Cart is empty" in result.output


class TestCustomerAndOrderCommands:

    def test_customer_lifecycle(self, run):
        result = run("customer", "add", "--email", "ada@example.com", "--name", "Ada")
        assert result.exit_code == 0
        assert "Ada" in run("customer", "list").output

    def test_order_status_flow(self, run):
        _seed(run)
        run("cart", "add", "--product", "Apples")
        run("cart", "checkout")

        assert "pending" in run("order", "show", "--id", "1").output
        assert run("order", "status", "--id", "1", "processing").exit_code == 0
        result = run("order", "status", "--id", "1", "pending")
        assert result.exit_code != 0
        assert "Cannot move order" in result.output

    def test_bad_config_reported(self, run):
        result = run("product", "list", extra_env={"FRESHCART_LOW_STOCK_THRESHOLD": "many"})
        assert result.exit_code != 0
        assert "FRESHCART_LOW_STOCK_THRESHOLD" in result.output
