"""Tests for the cart view adapter.

A spying cart store records which mutator each button calls, so the tests
can assert the removal path is ``remove_from_cart`` and never
``update_quantity(id, 0)``.
"""

from storefront.application.view_adapter import CartChange, CartViewAdapter
from storefront.domain.service.cart_store import CartStore
from storefront.domain.service.catalog_filter import CatalogFilter
from tests.fakes import FakeProductSource, make_product

WIDGET = make_product(1, "Widget", "15.00", category="Tools")
GADGET = make_product(2, "Gadget", "25.00", category="Toys")


class SpyCartStore(CartStore):

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    def add_to_cart(self, product, quantity=1):
        self.calls.append(("add_to_cart", product.id, quantity))
        super().add_to_cart(product, quantity)

    def remove_from_cart(self, product_id):
        self.calls.append(("remove_from_cart", product_id))
        super().remove_from_cart(product_id)

    def update_quantity(self, product_id, quantity):
        self.calls.append(("update_quantity", product_id, quantity))
        super().update_quantity(product_id, quantity)


def _setup() -> tuple[CartViewAdapter, SpyCartStore]:
    store = SpyCartStore()
    catalog = CatalogFilter(FakeProductSource([WIDGET, GADGET]))
    return CartViewAdapter(store, catalog), store


class TestQueries:

    def test_absent_product_has_zero_quantity(self):
        adapter, _ = _setup()
        assert adapter.quantity_in_cart(1) == 0
        assert not adapter.is_in_cart(1)

    def test_quantity_follows_cart(self):
        adapter, store = _setup()
        store.add_to_cart(WIDGET, 4)
        assert adapter.quantity_in_cart(1) == 4
        assert adapter.is_in_cart(1)
        assert not adapter.is_in_cart(2)

    def test_category_options(self):
        adapter, _ = _setup()
        assert [o.value for o in adapter.category_options()] == ["", "Tools", "Toys"]

    def test_queries_do_not_mutate(self):
        adapter, store = _setup()
        adapter.quantity_in_cart(1)
        adapter.is_in_cart(2)
        adapter.category_options()
        adapter.inventory_status_options()
        assert store.calls == []


class TestIncrease:

    def test_first_increase_adds(self):
        adapter, store = _setup()
        assert adapter.increase_quantity(WIDGET) == CartChange.ADDED
        assert store.calls == [("add_to_cart", 1, 1)]

    def test_next_increase_updates(self):
        adapter, _ = _setup()
        adapter.add(WIDGET)
        assert adapter.increase_quantity(WIDGET) == CartChange.UPDATED
        assert adapter.quantity_in_cart(1) == 2


class TestAdd:

    def test_add_with_quantity_creates_line(self):
        adapter, store = _setup()
        assert adapter.add(WIDGET, 3) == CartChange.ADDED
        assert store.calls == [("add_to_cart", 1, 3)]
        assert adapter.quantity_in_cart(1) == 3

    def test_zero_quantity_on_absent_product_is_unchanged(self):
        adapter, _ = _setup()
        assert adapter.add(WIDGET, 0) == CartChange.UNCHANGED
        assert not adapter.is_in_cart(1)

    def test_negative_merge_that_keeps_line_is_update(self):
        adapter, store = _setup()
        store.add_to_cart(WIDGET, 5)
        assert adapter.add(WIDGET, -2) == CartChange.UPDATED
        assert adapter.quantity_in_cart(1) == 3

    def test_negative_merge_that_empties_line_is_removal(self):
        adapter, store = _setup()
        store.add_to_cart(WIDGET, 2)
        assert adapter.add(WIDGET, -5) == CartChange.REMOVED
        assert not adapter.is_in_cart(1)


class TestDecrease:

    def test_above_one_updates_quantity(self):
        adapter, store = _setup()
        store.add_to_cart(WIDGET, 3)
        store.calls.clear()

        assert adapter.decrease_quantity(WIDGET) == CartChange.UPDATED
        assert store.calls == [("update_quantity", 1, 2)]
        assert adapter.quantity_in_cart(1) == 2

    def test_last_unit_goes_through_remove(self):
        adapter, store = _setup()
        store.add_to_cart(WIDGET, 1)
        store.calls.clear()

        assert adapter.decrease_quantity(WIDGET) == CartChange.REMOVED
        assert store.calls == [("remove_from_cart", 1)]
        assert not adapter.is_in_cart(1)

    def test_absent_product_makes_no_call(self):
        adapter, store = _setup()
        assert adapter.decrease_quantity(WIDGET) == CartChange.UNCHANGED
        assert store.calls == []


class TestRemove:

    def test_remove_present(self):
        adapter, store = _setup()
        store.add_to_cart(GADGET, 5)
        assert adapter.remove(GADGET) == CartChange.REMOVED
        assert store.cart.is_empty

    def test_remove_absent(self):
        adapter, store = _setup()
        assert adapter.remove(GADGET) == CartChange.UNCHANGED
        assert store.calls == []
