"""View adapter between the stores and a display layer.

Read-only queries over the cart plus the three cart buttons shown on a
product tile. The buttons translate one UI action into exactly one Cart
Store call and report what happened, so the display can tell an item
that was removed apart from one whose quantity only changed.
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.model.product import Product
from storefront.domain.service.cart_store import CartStore
from storefront.domain.service.catalog_filter import CatalogFilter, FacetOption


class CartChange(Enum):
    ADDED = "ADDED"
    UPDATED = "UPDATED"
    REMOVED = "REMOVED"
    UNCHANGED = "UNCHANGED"


class CartViewAdapter:

    def __init__(self, cart_store: CartStore, catalog_filter: CatalogFilter) -> None:
        self._cart_store = cart_store
        self._catalog_filter = catalog_filter

    # --- Queries --------------------------------------------------------------

    def quantity_in_cart(self, product_id: int) -> int:
        return self._cart_store.quantity_of(product_id)

    def is_in_cart(self, product_id: int) -> bool:
        return self.quantity_in_cart(product_id) > 0

    def category_options(self) -> list[FacetOption]:
        return self._catalog_filter.category_options()

    def inventory_status_options(self) -> list[FacetOption]:
        return self._catalog_filter.inventory_status_options()

    # --- Cart buttons ---------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartChange:
        """Merge ``quantity`` into the cart and report what actually changed."""
        before = self.quantity_in_cart(product.id)
        self._cart_store.add_to_cart(product, quantity)
        after = self.quantity_in_cart(product.id)
        if after == before:
            return CartChange.UNCHANGED
        if before == 0:
            return CartChange.ADDED
        if after == 0:
            return CartChange.REMOVED
        return CartChange.UPDATED

    def increase_quantity(self, product: Product) -> CartChange:
        return self.add(product, 1)

    def decrease_quantity(self, product: Product) -> CartChange:
        """Take one unit off; the last unit goes through ``remove_from_cart``."""
        current = self.quantity_in_cart(product.id)
        if current > 1:
            self._cart_store.update_quantity(product.id, current - 1)
            return CartChange.UPDATED
        if current == 1:
            self._cart_store.remove_from_cart(product.id)
            return CartChange.REMOVED
        return CartChange.UNCHANGED

    def remove(self, product: Product) -> CartChange:
        if not self.is_in_cart(product.id):
            return CartChange.UNCHANGED
        self._cart_store.remove_from_cart(product.id)
        return CartChange.REMOVED
