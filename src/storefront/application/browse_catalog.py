"""Application service: Browse Catalog use case (query).

Reads the current page from the catalog filter and decorates each product
with how many units of it are already in the cart.
"""

from __future__ import annotations

from storefront.application.dto import CriteriaDTO, ProductCardDTO, ProductPageDTO
from storefront.application.view_adapter import CartViewAdapter
from storefront.domain.model.filter_criteria import FilterCriteria
from storefront.domain.model.product import Product
from storefront.domain.service.catalog_filter import CatalogFilter


class BrowseCatalogHandler:

    def __init__(self, catalog_filter: CatalogFilter, view_adapter: CartViewAdapter) -> None:
        self._catalog_filter = catalog_filter
        self._view_adapter = view_adapter

    def handle(self) -> ProductPageDTO:
        catalog = self._catalog_filter
        filtered = catalog.filtered_products
        page_state = catalog.state.page
        return ProductPageDTO(
            items=[self._to_dto(p) for p in page_state.slice(filtered)],
            page=page_state.current_page,
            items_per_page=page_state.items_per_page,
            total_records=len(filtered),
            total_pages=page_state.page_count(len(filtered)),
            criteria=self._criteria_dto(catalog.criteria),
        )

    @staticmethod
    def _criteria_dto(criteria: FilterCriteria) -> CriteriaDTO:
        return CriteriaDTO(
            search_text=criteria.search_text,
            category=criteria.selected_category,
            inventory_status=criteria.selected_inventory_status,
            min_price="" if criteria.min_price is None else str(criteria.min_price),
            max_price="" if criteria.max_price is None else str(criteria.max_price),
        )

    def _to_dto(self, product: Product) -> ProductCardDTO:
        return ProductCardDTO(
            id=product.id,
            code=product.code,
            name=product.name,
            category=product.category,
            price=str(product.price),
            inventory_status=product.inventory_status.value,
            inventory_label=product.inventory_status.label,
            quantity_in_cart=self._view_adapter.quantity_in_cart(product.id),
        )
