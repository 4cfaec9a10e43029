"""Abstract source of catalog products.

Defined in the domain layer so the domain never depends on
infrastructure. The storefront only reads from it; creating, updating
and deleting products belongs to whoever owns the concrete source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductSource(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product, in catalog order."""

    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None
