"""End-to-end tests for the click command line."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.bootstrap import CATALOG_ENV, ITEMS_PER_PAGE_ENV
from storefront.infrastructure.cli.main import cli

PRODUCTS = [
    {"id": 1, "name": "Widget", "price": "10.00", "category": "X", "inventoryStatus": "INSTOCK"},
    {"id": 2, "name": "Gadget", "price": "20.00", "category": "Y", "inventoryStatus": "LOWSTOCK"},
    {"id": 3, "name": "Doohickey", "price": "30.00", "category": "X", "inventoryStatus": "OUTOFSTOCK"},
]


@pytest.fixture
def run(tmp_path):
    catalog = tmp_path / "products.json"
    catalog.write_text(json.dumps(PRODUCTS), encoding="utf-8")
    runner = CliRunner()

    def _run(*args, per_page: str = "12"):
        return runner.invoke(
            cli,
            list(args),
            env={CATALOG_ENV: str(catalog), ITEMS_PER_PAGE_ENV: per_page},
        )

    return _run


class TestCatalogCommands:

    def test_list_all(self, run):
        result = run("catalog", "list")
        assert result.exit_code == 0, result.output
        for name in ("Widget", "Gadget", "Doohickey"):
            assert name in result.output
        assert "Page 1 of 1  (3 matching products)" in result.output

    def test_list_filtered_and_paged(self, run):
        result = run("catalog", "list", "--category", "X", "--per-page", "1", "--page", "2")
        assert result.exit_code == 0, result.output
        assert "Doohickey" in result.output
        assert "Widget" not in result.output
        assert "Page 2 of 2" in result.output

    def test_list_price_range(self, run):
        result = run("catalog", "list", "--min-price", "15", "--max-price", "25")
        assert "Gadget" in result.output
        assert "Widget" not in result.output
        assert "(1 matching products)" in result.output

    def test_list_no_match(self, run):
        result = run("catalog", "list", "--search", "nothing-like-this")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_invalid_page_size_from_env(self, run):
        result = run("catalog", "list", per_page="0")
        assert result.exit_code != 0
        assert "Items per page must be at least 1" in result.output

    def test_categories(self, run):
        result = run("catalog", "categories")
        assert result.output.splitlines() == ["All categories", "X", "Y"]

    def test_statuses(self, run):
        result = run("catalog", "statuses")
        assert result.exit_code == 0
        assert "LOWSTOCK" in result.output
        assert "Low stock" in result.output


class TestCartRun:

    def test_add_merges_and_totals(self, run):
        result = run("cart", "run", "add:1", "add:1:2", "add:2")
        assert result.exit_code == 0, result.output
        assert "Widget added (in cart: 1)" in result.output
        assert "Widget updated (in cart: 3)" in result.output
        assert "Items" in result.output
        assert "50.00" in result.output

    def test_decrease_last_unit_removes(self, run):
        result = run("cart", "run", "inc:1", "dec:1")
        assert "Widget removed (in cart: 0)" in result.output
        assert "Cart is empty." in result.output

    def test_update_absent_is_noop(self, run):
        result = run("cart", "run", "update:2:5")
        assert "#2 not in cart" in result.output
        assert "Cart is empty." in result.output

    def test_update_zero_removes(self, run):
        result = run("cart", "run", "add:2:3", "update:2:0")
        assert "#2 removed" in result.output

    def test_add_zero_to_absent_product_is_unchanged(self, run):
        result = run("cart", "run", "add:1:0")
        assert result.exit_code == 0, result.output
        assert "Widget unchanged (in cart: 0)" in result.output
        assert "Cart is empty." in result.output

    def test_negative_add_that_empties_line_reports_removal(self, run):
        result = run("cart", "run", "add:1:2", "add:1:-5")
        assert "Widget removed (in cart: 0)" in result.output
        assert "Cart is empty." in result.output

    def test_negative_add_that_keeps_line_reports_update(self, run):
        result = run("cart", "run", "add:1:5", "add:1:-2")
        assert "Widget updated (in cart: 3)" in result.output

    def test_remove_goes_through_cart_buttons(self, run):
        result = run("cart", "run", "add:2", "remove:2", "remove:2")
        assert "Gadget removed (in cart: 0)" in result.output
        assert "Gadget unchanged (in cart: 0)" in result.output
        assert "Cart is empty." in result.output

    def test_clear(self, run):
        result = run("cart", "run", "add:1", "add:2", "clear")
        assert "Cart cleared" in result.output
        assert "Cart is empty." in result.output

    def test_unknown_product(self, run):
        result = run("cart", "run", "add:99")
        assert result.exit_code != 0
        assert "Product not found: 99" in result.output

    @pytest.mark.parametrize("token", ["buy:1", "add", "update:1", "add:x"])
    def test_bad_action(self, run, token):
        result = run("cart", "run", token)
        assert result.exit_code == 2
