"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. ``build_storefront``
creates exactly one cart store and one catalog filter and hands the same
instances to everything that consumes them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.view_adapter import CartViewAdapter
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.filter_criteria import DEFAULT_ITEMS_PER_PAGE
from storefront.domain.repository.product_source import ProductSource
from storefront.domain.service.cart_store import CartStore
from storefront.domain.service.catalog_filter import CatalogFilter
from storefront.infrastructure.persistence.json_product_source import (
    JsonProductSource,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

CATALOG_ENV = "STOREFRONT_CATALOG"
ITEMS_PER_PAGE_ENV = "STOREFRONT_ITEMS_PER_PAGE"


@dataclass(frozen=True)
class Settings:
    catalog_path: Path
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    @staticmethod
    def from_env() -> Settings:
        catalog = os.environ.get(CATALOG_ENV)
        raw_per_page = os.environ.get(ITEMS_PER_PAGE_ENV)
        return Settings(
            catalog_path=Path(catalog) if catalog else _DATA_DIR / "products.json",
            items_per_page=(
                parse_items_per_page(raw_per_page)
                if raw_per_page
                else DEFAULT_ITEMS_PER_PAGE
            ),
        )


def parse_items_per_page(raw: str | int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Items per page must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValidationError(f"Items per page must be at least 1, got {value}")
    return value


@dataclass
class Storefront:
    """The wired object graph handed to a display layer."""

    product_source: ProductSource
    cart_store: CartStore
    catalog_filter: CatalogFilter
    view_adapter: CartViewAdapter

    def show_cart(self) -> ShowCartHandler:
        return ShowCartHandler(self.cart_store)

    def browse_catalog(self) -> BrowseCatalogHandler:
        return BrowseCatalogHandler(self.catalog_filter, self.view_adapter)


def product_source(settings: Settings) -> JsonProductSource:
    return JsonProductSource(settings.catalog_path)


def build_storefront(
    settings: Settings | None = None,
    source: ProductSource | None = None,
) -> Storefront:
    settings = settings or Settings.from_env()
    source = source or product_source(settings)
    cart_store = CartStore()
    catalog_filter = CatalogFilter(source, items_per_page=settings.items_per_page)
    return Storefront(
        product_source=source,
        cart_store=cart_store,
        catalog_filter=catalog_filter,
        view_adapter=CartViewAdapter(cart_store, catalog_filter),
    )
