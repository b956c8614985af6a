"""Domain events for the InventoryItem aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from bookstore.domain import bookstore


@bookstore.event(part_of="InventoryItem")
class StockInitialized:
    """An inventory record was seeded for a product."""

    __version__ = 1

    product_id = Identifier(required=True)
    product_type = String(required=True)
    quantity = Integer(required=True)
    initialized_at = DateTime(required=True)


@bookstore.event(part_of="InventoryItem")
class StockReserved:
    """Stock was taken out of the available quantity for a shipment."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_available = Integer(required=True)
    new_available = Integer(required=True)
    reserved_at = DateTime(required=True)
