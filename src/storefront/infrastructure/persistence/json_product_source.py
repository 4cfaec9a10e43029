"""JSON-file-backed, read-only implementation of ProductSource.

The file holds a JSON array of product records using the catalog API's
field names (``inventoryStatus``, ``internalReference``, ...). It is read
again on every call, so callers always see the current snapshot.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import InventoryStatus, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_source import ProductSource

logger = logging.getLogger(__name__)


class JsonProductSource(ProductSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductSource interface ----------------------------------------------

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._load_raw()]
        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        if not isinstance(raw, dict):
            raise ValidationError(f"Product record must be a JSON object, got {raw!r}")
        try:
            product_id = int(raw["id"])
            name = raw["name"]
            price = raw["price"]
        except KeyError as exc:
            raise ValidationError(f"Product record is missing field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid product id: {raw['id']!r}") from exc

        status = raw.get("inventoryStatus") or InventoryStatus.IN_STOCK.value
        try:
            inventory_status = InventoryStatus(status)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown inventory status {status!r} for product {product_id}"
            ) from exc

        return Product(
            id=product_id,
            name=name,
            price=Money.of(price),
            category=raw.get("category") or "",
            description=raw.get("description") or "",
            code=raw.get("code") or "",
            inventory_status=inventory_status,
            image=raw.get("image") or "",
            quantity=raw.get("quantity") or 0,
            internal_reference=raw.get("internalReference") or "",
            shell_id=raw.get("shellId"),
            rating=raw.get("rating"),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            logger.warning("Catalog file %s not found, using an empty catalog", self._file_path)
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog file {self._file_path} is not valid JSON") from exc
        if not isinstance(raw, list):
            raise ValidationError(f"Catalog file {self._file_path} must hold a JSON array")
        return raw
