"""Cart value: an ordered set of cart lines keyed by product id.

A Cart is immutable: every change returns a new Cart, so the store that
owns it swaps the whole value in a single assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """One (product, quantity) pairing. ``quantity`` is always >= 1."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class Cart:
    """Cart lines in first-add order.

    Invariants:
    - at most one line per product id
    - every line has ``quantity >= 1``; a line that would drop to zero
      is removed instead
    - updating a line keeps its position
    """

    lines: tuple[CartLine, ...] = ()

    # --- Lookups --------------------------------------------------------------

    def find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: int) -> int:
        line = self.find(product_id)
        return line.quantity if line is not None else 0

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    # --- Derived totals (recomputed on every read) ----------------------------

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Patches --------------------------------------------------------------

    def with_added(self, product: Product, quantity: int) -> Cart:
        """Merge ``quantity`` into the line for ``product`` or append a new line.

        A merge that leaves the line at zero or below drops the line; a new
        line is only created for a positive quantity.
        """
        existing = self.find(product.id)
        if existing is None:
            if quantity <= 0:
                return self
            return Cart(self.lines + (CartLine(product, quantity),))

        merged = existing.quantity + quantity
        if merged <= 0:
            return self.without(product.id)
        return self._replace_line(replace(existing, quantity=merged))

    def with_quantity(self, product_id: int, quantity: int) -> Cart:
        """Set the absolute quantity of an existing line.

        ``quantity <= 0`` removes the line. Never creates a line.
        """
        if quantity <= 0:
            return self.without(product_id)
        existing = self.find(product_id)
        if existing is None:
            return self
        return self._replace_line(replace(existing, quantity=quantity))

    def without(self, product_id: int) -> Cart:
        if self.find(product_id) is None:
            return self
        return Cart(tuple(line for line in self.lines if line.product_id != product_id))

    # --- Internal helpers -----------------------------------------------------

    def _replace_line(self, new_line: CartLine) -> Cart:
        return Cart(
            tuple(
                new_line if line.product_id == new_line.product_id else line
                for line in self.lines
            )
        )
