"""InventoryItem aggregate — stock on hand for one product.

Stock Model:
    quantity_available: units that can still be reserved; never negative.

Reservations are permanent. There is no hold, expiry or release: a
successful reservation simply lowers the available quantity.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from bookstore.domain import bookstore
from bookstore.inventory.events import StockInitialized, StockReserved


class ProductType(Enum):
    BOOK = "Book"
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    OTHER = "Other"


@bookstore.aggregate
class InventoryItem:
    """Stock record keyed by the product it counts."""

    product_id = Identifier(identifier=True)
    product_type = String(choices=ProductType, default=ProductType.BOOK.value)
    quantity_available = Integer(default=0, min_value=0)
    updated_at = DateTime()

    @classmethod
    def stock(cls, product_id, product_type=ProductType.BOOK, quantity=0):
        """Seed an inventory record for a product."""
        if quantity is None or quantity < 0:
            raise ValidationError({"quantity_available": ["Initial quantity cannot be negative"]})

        product_type = ProductType(product_type).value
        now = datetime.now(UTC)

        item = cls(
            product_id=str(product_id),
            product_type=product_type,
            quantity_available=quantity,
            updated_at=now,
        )
        item.raise_(
            StockInitialized(
                product_id=str(product_id),
                product_type=product_type,
                quantity=quantity,
                initialized_at=now,
            )
        )
        return item

    def reserve(self, quantity):
        """Take ``quantity`` units out of the available stock.

        Returns False and leaves the item untouched when fewer than
        ``quantity`` units are available. Non-positive quantities are
        rejected outright.
        """
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        available = self.quantity_available
        if available < quantity:
            return False

        now = datetime.now(UTC)
        self.quantity_available = available - quantity
        self.updated_at = now

        self.raise_(
            StockReserved(
                product_id=str(self.product_id),
                quantity=quantity,
                previous_available=available,
                new_available=self.quantity_available,
                reserved_at=now,
            )
        )
        return True
