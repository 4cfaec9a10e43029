"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the display layer without
exposing domain internals to it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its totals."""

    items: list[CartLineDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class ProductCardDTO:
    """Output: one product tile on a catalog page."""

    id: int
    code: str
    name: str
    category: str
    price: str
    inventory_status: str
    inventory_label: str
    quantity_in_cart: int


@dataclass(frozen=True)
class CriteriaDTO:
    """Output: the filter that produced a catalog page. Empty means unset."""

    search_text: str
    category: str
    inventory_status: str
    min_price: str
    max_price: str


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: the current catalog page and where it sits in the results."""

    items: list[ProductCardDTO]
    page: int
    items_per_page: int
    total_records: int
    total_pages: int
    criteria: CriteriaDTO
