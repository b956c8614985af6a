"""Repository for the InventoryItem aggregate."""

from protean.exceptions import ObjectNotFoundError

from bookstore.domain import bookstore
from bookstore.inventory.stock import InventoryItem


@bookstore.repository(part_of=InventoryItem)
class InventoryRepository:
    """Inventory records keyed by product id.

    ``save`` and ``update`` are both upserts; nothing distinguishes a first
    write from a later one.
    """

    def find_by_product_id(self, product_id) -> InventoryItem | None:
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None

    def _upsert(self, item: InventoryItem) -> InventoryItem:
        if item.state_.is_new:
            try:
                existing = self._dao.get(str(item.product_id))
            except ObjectNotFoundError:
                existing = None

            # A fresh instance for a stored product replaces the stored record
            if existing is not None:
                item._version = existing._version
                item.state_.mark_retrieved()

        return self.add(item)

    def save(self, item: InventoryItem) -> InventoryItem:
        return self._upsert(item)

    def update(self, item: InventoryItem) -> InventoryItem:
        return self._upsert(item)
