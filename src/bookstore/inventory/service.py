"""Stock reservation against the inventory store."""

import structlog
from protean.exceptions import ObjectNotFoundError

logger = structlog.get_logger(__name__)


class InventoryService:
    """Reserves stock through an injected InventoryRepository."""

    def __init__(self, inventory_repository):
        self.inventory_repository = inventory_repository

    def _load(self, product_id):
        item = self.inventory_repository.find_by_product_id(product_id)
        if item is None:
            raise ObjectNotFoundError({"_entity": f"Inventory item for product {product_id} not found"})
        return item

    def reserve_stock(self, product_id, quantity) -> bool:
        """Reserve ``quantity`` units of ``product_id``.

        Returns True and persists the lowered quantity on success. Returns
        False, without writing anything, when stock is insufficient.
        """
        item = self._load(product_id)

        if not item.reserve(quantity):
            logger.warning(
                "Insufficient stock",
                product_id=str(product_id),
                requested=quantity,
                available=item.quantity_available,
            )
            return False

        self.inventory_repository.update(item)
        logger.info(
            "Stock reserved",
            product_id=str(product_id),
            quantity=quantity,
            remaining=item.quantity_available,
        )
        return True

    def stock_level(self, product_id) -> int:
        """Units of ``product_id`` currently available."""
        return self._load(product_id).quantity_available
