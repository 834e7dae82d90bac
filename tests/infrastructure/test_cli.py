"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from checkout.infrastructure.cli.main import cli
from checkout.infrastructure.config import load_settings


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CHECKOUT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "WARNING")
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


def _seed(data_dir):
    (data_dir / "customers.json").write_text(json.dumps([
        {"id": "cust-1", "name": "Alice", "email": "alice@example.com"},
    ]))
    (data_dir / "products.json").write_text(json.dumps([
        {"id": "p1", "name": "Widget", "price": "20", "currency": "USD", "quantity": 10},
        {"id": "p2", "name": "Gadget", "price": "5", "currency": "USD", "quantity": 3},
    ]))


def _stock(data_dir) -> dict:
    raw = json.loads((data_dir / "products.json").read_text())
    return {p["id"]: p["quantity"] for p in raw}


class TestOrderCommands:

    def test_place_order(self, runner, data_dir):
        _seed(data_dir)

        result = runner.invoke(
            cli, ["order", "place", "--customer", "cust-1", "--items", "p1:2, p2:1"]
        )

        assert result.exit_code == 0, result.output
        assert "placed" in result.output
        assert "$45.00" in result.output
        assert _stock(data_dir) == {"p1": 8, "p2": 2}
        orders = json.loads((data_dir / "orders.json").read_text())
        assert len(orders) == 1

    def test_place_then_show(self, runner, data_dir):
        _seed(data_dir)
        runner.invoke(cli, ["order", "place", "--customer", "cust-1", "--items", "p1:1"])
        order_id = json.loads((data_dir / "orders.json").read_text())[0]["id"]

        result = runner.invoke(cli, ["order", "show", "--id", order_id])

        assert result.exit_code == 0, result.output
        assert order_id in result.output
        assert "$20.00" in result.output

    def test_insufficient_stock_is_reported(self, runner, data_dir):
        _seed(data_dir)

        result = runner.invoke(
            cli, ["order", "place", "--customer", "cust-1", "--items", "p2:7"]
        )

        assert result.exit_code == 1
        assert "The quantity 7 is not available for product 'p2'" in result.output
        assert _stock(data_dir) == {"p1": 10, "p2": 3}

    def test_unknown_customer_is_reported(self, runner, data_dir):
        _seed(data_dir)
        result = runner.invoke(
            cli, ["order", "place", "--customer", "ghost", "--items", "p1:1"]
        )
        assert result.exit_code == 1
        assert "Could not find any customer" in result.output

    def test_malformed_items_rejected(self, runner, data_dir):
        result = runner.invoke(
            cli, ["order", "place", "--customer", "cust-1", "--items", "p1"]
        )
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_show_unknown_order(self, runner, data_dir):
        result = runner.invoke(cli, ["order", "show", "--id", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCatalogCommands:

    def test_add_and_list_products(self, runner, data_dir):
        result = runner.invoke(
            cli, ["product", "add", "--name", "Widget", "--price", "15.00", "--quantity", "4"]
        )
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["product", "list"])
        assert "Widget" in result.output
        assert "$15.00" in result.output

    def test_update_product(self, runner, data_dir):
        _seed(data_dir)
        result = runner.invoke(
            cli, ["product", "update", "--id", "p1", "--price", "12.50", "--quantity", "1"]
        )
        assert result.exit_code == 0, result.output
        assert _stock(data_dir)["p1"] == 1

    def test_add_customer(self, runner, data_dir):
        result = runner.invoke(
            cli, ["customer", "add", "--name", "Bob", "--email", "bob@example.com"]
        )
        assert result.exit_code == 0, result.output
        customers = json.loads((data_dir / "customers.json").read_text())
        assert customers[0]["email"] == "bob@example.com"


class TestSettings:

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHECKOUT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "debug")
        monkeypatch.setenv("CHECKOUT_LOG_JSON", "true")

        settings = load_settings()

        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Invalid CHECKOUT_LOG_LEVEL 'CHATTY'"):
            load_settings()

    def test_cli_reports_unknown_log_level(self, runner, data_dir, monkeypatch):
        monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "chatty")

        result = runner.invoke(cli, ["product", "list"])

        assert result.exit_code == 1
        assert "Invalid CHECKOUT_LOG_LEVEL" in result.output
        assert "Traceback" not in result.output
