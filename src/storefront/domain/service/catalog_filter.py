"""Domain service: catalog filter and pagination.

Derives the visible catalog from three inputs: a snapshot of the product
source, the current FilterCriteria and the current PageState. Nothing is
cached; every read runs the pipeline again:

    source snapshot -> filter (all predicates ANDed) -> page slice

Criteria and page live together in one CatalogState. Every criteria
mutator builds the next state with the page reset to 0 and assigns it in
one step, so a new filter is never observed together with an old page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.model.filter_criteria import (
    DEFAULT_ITEMS_PER_PAGE,
    CatalogState,
    FilterCriteria,
    PageState,
    PriceBound,
)
from storefront.domain.model.product import InventoryStatus, Product
from storefront.domain.repository.product_source import ProductSource

logger = logging.getLogger(__name__)

ALL_CATEGORIES_LABEL = "All categories"
ALL_STATUSES_LABEL = "All statuses"


@dataclass(frozen=True)
class FacetOption:
    """A selectable filter value. An empty ``value`` means "no constraint"."""

    label: str
    value: str


class CatalogFilter:

    def __init__(
        self,
        product_source: ProductSource,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
    ) -> None:
        self._product_source = product_source
        self._state = CatalogState(page=PageState(items_per_page=items_per_page))

    # --- State ----------------------------------------------------------------

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    @property
    def current_page(self) -> int:
        return self._state.page.current_page

    @property
    def items_per_page(self) -> int:
        return self._state.page.items_per_page

    # --- Derived views --------------------------------------------------------

    @property
    def all_products(self) -> list[Product]:
        return self._product_source.list_all()

    @property
    def filtered_products(self) -> list[Product]:
        criteria = self._state.criteria
        return [p for p in self.all_products if criteria.matches(p)]

    @property
    def paginated_products(self) -> list[Product]:
        return self._state.page.slice(self.filtered_products)

    @property
    def total_records(self) -> int:
        return len(self.filtered_products)

    @property
    def total_pages(self) -> int:
        return self._state.page.page_count(self.total_records)

    def category_options(self) -> list[FacetOption]:
        """Distinct categories of the unfiltered catalog, first-seen order."""
        seen: dict[str, None] = {}
        for product in self.all_products:
            if product.category:
                seen.setdefault(product.category, None)
        return [FacetOption(ALL_CATEGORIES_LABEL, "")] + [
            FacetOption(category, category) for category in seen
        ]

    def inventory_status_options(self) -> list[FacetOption]:
        return [FacetOption(ALL_STATUSES_LABEL, "")] + [
            FacetOption(status.label, status.value) for status in InventoryStatus
        ]

    # --- Criteria mutators (each resets the page) -----------------------------

    def on_search_change(self, search_text: str) -> None:
        self.apply_filters(search_text=search_text or "")

    def on_category_change(self, category: str) -> None:
        self.apply_filters(selected_category=category or "")

    def on_inventory_status_change(self, status: InventoryStatus | str | None) -> None:
        self.apply_filters(selected_inventory_status=status)

    def on_min_price_change(self, min_price: PriceBound) -> None:
        self.apply_filters(min_price=min_price)

    def on_max_price_change(self, max_price: PriceBound) -> None:
        self.apply_filters(max_price=max_price)

    def clear_filters(self) -> None:
        self._set_criteria(FilterCriteria())

    def apply_filters(self, **changes) -> None:
        """Patch several criteria fields at once; page goes back to 0."""
        self._set_criteria(self._state.criteria.replace(**changes))

    # --- Page mutator ---------------------------------------------------------

    def on_page_change(self, page_index: int) -> None:
        self._state = self._state.with_page(page_index)
        logger.debug("page -> %s", page_index)

    # --- Internal helpers -----------------------------------------------------

    def _set_criteria(self, criteria: FilterCriteria) -> None:
        self._state = self._state.with_criteria(criteria)
        logger.debug("criteria -> %s (page reset)", criteria)
