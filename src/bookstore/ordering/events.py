"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from bookstore.domain import bookstore


@bookstore.event(part_of="Order")
class OrderPlaced:
    """A customer built a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_count = Integer(required=True)
    total_amount = Float(required=True)
    placed_at = DateTime(required=True)


@bookstore.event(part_of="Order")
class OrderConfirmed:
    """Payment was verified and the order was confirmed."""

    __version__ = 1

    order_id = Identifier(required=True)
    total_amount = Float(required=True)
    confirmed_at = DateTime(required=True)


@bookstore.event(part_of="Order")
class OrderShipped:
    """Stock was reserved for every item and the order left the warehouse."""

    __version__ = 1

    order_id = Identifier(required=True)
    shipped_at = DateTime(required=True)
