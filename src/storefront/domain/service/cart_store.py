"""Domain service: Cart Store.

Owns the single authoritative Cart value. Every mutator computes the next
Cart from the current one and swaps it in with one assignment. Totals are
read straight off the current Cart, so they can never drift from the
lines.

None of these operations raise: removing or updating a product that is
not in the cart is a silent no-op.
"""

from __future__ import annotations

import logging

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(self, cart: Cart | None = None) -> None:
        self._cart = cart if cart is not None else Cart()

    # --- Reads ----------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def cart_items(self) -> tuple[CartLine, ...]:
        return self._cart.lines

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    @property
    def total_price(self) -> Money:
        return self._cart.total_price

    def quantity_of(self, product_id: int) -> int:
        return self._cart.quantity_of(product_id)

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` of ``product``; merges into an existing line."""
        self._cart = self._cart.with_added(product, quantity)
        logger.debug(
            "add_to_cart product=%s +%s -> %s",
            product.id, quantity, self._cart.quantity_of(product.id),
        )

    def remove_from_cart(self, product_id: int) -> None:
        before = self._cart
        self._cart = self._cart.without(product_id)
        if self._cart is before:
            logger.debug("remove_from_cart product=%s not in cart", product_id)
        else:
            logger.debug("remove_from_cart product=%s", product_id)

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set an absolute quantity.

        ``quantity <= 0`` removes the line; a product that is not in the
        cart is left out (unlike ``add_to_cart``, this never creates).
        """
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        before = self._cart
        self._cart = self._cart.with_quantity(product_id, quantity)
        if self._cart is before:
            logger.debug("update_quantity product=%s not in cart", product_id)
        else:
            logger.debug("update_quantity product=%s -> %s", product_id, quantity)

    def clear_cart(self) -> None:
        self._cart = Cart()
        logger.debug("clear_cart")
