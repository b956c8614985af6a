"""Order aggregate — the core of the ordering domain.

State Machine (forward only):
    NEW → CONFIRMED → SHIPPED → DELIVERED

No operation drives an order to DELIVERED yet; the state exists so that the
transition table is complete.

The total is fixed when the order is created: it is the sum of the item
line prices at that moment and is never recalculated.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from bookstore.domain import bookstore
from bookstore.ordering.events import OrderConfirmed, OrderPlaced, OrderShipped
from bookstore.shared.address import Address


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    NEW = "New"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.NEW: {OrderStatus.CONFIRMED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
}


def can_transition(current, target):
    """True when ``target`` directly follows ``current`` in the lifecycle."""
    return OrderStatus(target) in _VALID_TRANSITIONS.get(OrderStatus(current), set())


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@bookstore.entity(part_of="Order")
class OrderItem:
    """A line item: a book snapshot and how many copies were ordered.

    ``price`` is the line price (unit price × quantity), derived once when
    the item is built.
    """

    book_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    isbn = String(max_length=17)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @classmethod
    def for_book(cls, book, quantity):
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        return cls(
            book_id=str(book.id),
            title=book.title,
            isbn=book.isbn.value if book.isbn else None,
            unit_price=book.price,
            quantity=quantity,
            price=round(book.price * quantity, 2),
        )


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@bookstore.aggregate
class Order:
    customer_id = Identifier(required=True)
    customer_name = String(max_length=100)
    shipping_address = ValueObject(Address, required=True)
    items = HasMany(OrderItem)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.NEW.value,
    )
    total_amount = Float(default=0.0, min_value=0.0)
    placed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer, items, order_id=None):
        """Create a new order for ``customer``.

        The customer's current shipping address is copied onto the order.
        ``items`` is a sequence of OrderItem; it may be empty.
        """
        items = list(items)
        now = datetime.now(UTC)

        data = {
            "customer_id": str(customer.id),
            "customer_name": customer.name,
            "shipping_address": customer.shipping_address,
            "items": items,
            "total_amount": round(sum(item.price for item in items), 2),
            "placed_at": now,
            "updated_at": now,
        }
        if order_id is not None:
            data["id"] = str(order_id)

        order = cls(**data)
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer.id),
                item_count=len(items),
                total_amount=order.total_amount,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if not can_transition(current, target_status):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def confirm(self, payment_confirmed):
        """Confirm a NEW order once its payment has been verified.

        The order trusts ``payment_confirmed``; it never talks to a payment
        provider itself.
        """
        if not payment_confirmed:
            raise ValidationError({"payment": ["Payment not confirmed"]})
        self._assert_can_transition(OrderStatus.CONFIRMED)

        now = datetime.now(UTC)
        self.status = OrderStatus.CONFIRMED.value
        self.updated_at = now

        self.raise_(
            OrderConfirmed(
                order_id=str(self.id),
                total_amount=self.total_amount,
                confirmed_at=now,
            )
        )

    def ship(self):
        """Ship a CONFIRMED order."""
        self._assert_can_transition(OrderStatus.SHIPPED)

        now = datetime.now(UTC)
        self.status = OrderStatus.SHIPPED.value
        self.updated_at = now

        self.raise_(
            OrderShipped(
                order_id=str(self.id),
                shipped_at=now,
            )
        )
