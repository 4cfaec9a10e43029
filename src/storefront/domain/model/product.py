"""Product entity.

Products are owned by the external product source. From the storefront's
point of view they are read-only snapshots: the cart and the catalog
filter only look at them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.value_objects import Money


class InventoryStatus(Enum):
    IN_STOCK = "INSTOCK"
    LOW_STOCK = "LOWSTOCK"
    OUT_OF_STOCK = "OUTOFSTOCK"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    InventoryStatus.IN_STOCK: "In stock",
    InventoryStatus.LOW_STOCK: "Low stock",
    InventoryStatus.OUT_OF_STOCK: "Out of stock",
}


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Only ``id``, ``name``, ``description``, ``code``, ``category``,
    ``price`` and ``inventory_status`` take part in cart and filter logic.
    The remaining fields are carried along for display.
    """

    id: int
    name: str
    price: Money
    category: str = ""
    description: str = ""
    code: str = ""
    inventory_status: InventoryStatus = InventoryStatus.IN_STOCK

    # display-only
    image: str = ""
    quantity: int = 0
    internal_reference: str = ""
    shell_id: int | None = None
    rating: int | None = None
    created_at: int | None = None
    updated_at: int | None = None
