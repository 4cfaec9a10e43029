"""Filter criteria and page state for the catalog view.

Both are frozen records. Changes are applied as patches that return a new
value, so the owner can swap criteria and page together in one assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation

from storefront.domain.model.product import InventoryStatus, Product

DEFAULT_ITEMS_PER_PAGE = 12

PriceBound = Decimal | int | float | str | None


def to_price_bound(value: PriceBound) -> Decimal | None:
    """Normalise a user supplied price bound.

    Blank or unparseable input means "no bound".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        bound = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not bound.is_finite():
        return None
    return bound


def to_status_value(status: InventoryStatus | str | None) -> str:
    if status is None:
        return ""
    if isinstance(status, InventoryStatus):
        return status.value
    return status


@dataclass(frozen=True)
class FilterCriteria:
    """The user's current constraints on the visible product set.

    An empty string or ``None`` means "no constraint" for that field.
    ``min_price > max_price`` is allowed and simply matches nothing.
    """

    search_text: str = ""
    selected_category: str = ""
    selected_inventory_status: str = ""
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    def replace(self, **changes) -> FilterCriteria:
        if "min_price" in changes:
            changes["min_price"] = to_price_bound(changes["min_price"])
        if "max_price" in changes:
            changes["max_price"] = to_price_bound(changes["max_price"])
        if "selected_inventory_status" in changes:
            changes["selected_inventory_status"] = to_status_value(
                changes["selected_inventory_status"]
            )
        return replace(self, **changes)

    @property
    def is_empty(self) -> bool:
        return self == FilterCriteria()

    # --- Predicates -----------------------------------------------------------

    def matches_search(self, product: Product) -> bool:
        if not self.search_text:
            return True
        needle = self.search_text.lower()
        haystacks = (product.name, product.description, product.code, product.category)
        return any(needle in (text or "").lower() for text in haystacks)

    def matches_category(self, product: Product) -> bool:
        return not self.selected_category or product.category == self.selected_category

    def matches_inventory_status(self, product: Product) -> bool:
        return (
            not self.selected_inventory_status
            or product.inventory_status.value == self.selected_inventory_status
        )

    def matches_min_price(self, product: Product) -> bool:
        return self.min_price is None or product.price.amount >= self.min_price

    def matches_max_price(self, product: Product) -> bool:
        return self.max_price is None or product.price.amount <= self.max_price

    def matches(self, product: Product) -> bool:
        return (
            self.matches_search(product)
            and self.matches_category(product)
            and self.matches_inventory_status(product)
            and self.matches_min_price(product)
            and self.matches_max_price(product)
        )


@dataclass(frozen=True)
class PageState:
    """Zero-based page index and page width.

    ``current_page`` is never clamped; a page past the end is just empty.
    """

    current_page: int = 0
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def slice(self, items: list[Product]) -> list[Product]:
        if self.current_page < 0 or self.items_per_page <= 0:
            return []
        start = self.current_page * self.items_per_page
        return items[start:start + self.items_per_page]

    def page_count(self, total: int) -> int:
        if self.items_per_page <= 0:
            return 0
        return -(-total // self.items_per_page)


@dataclass(frozen=True)
class CatalogState:
    """Criteria and page held together so they change in one step."""

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    page: PageState = field(default_factory=PageState)

    def with_criteria(self, criteria: FilterCriteria) -> CatalogState:
        return CatalogState(criteria=criteria, page=replace(self.page, current_page=0))

    def with_page(self, page_index: int) -> CatalogState:
        return CatalogState(criteria=self.criteria, page=replace(self.page, current_page=page_index))
