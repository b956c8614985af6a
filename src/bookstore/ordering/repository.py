"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from bookstore.domain import bookstore
from bookstore.ordering.order import Order


@bookstore.repository(part_of=Order)
class OrderRepository:
    """Orders keyed by id. ``save`` inserts or replaces."""

    def find_by_id(self, order_id) -> Order | None:
        try:
            return self.get(str(order_id))
        except ObjectNotFoundError:
            return None

    def save(self, order: Order) -> Order:
        if order.state_.is_new:
            existing = self.find_by_id(order.id)
            if existing is not None:
                # Drop line items the replacement does not carry
                kept_ids = {str(item.id) for item in order.items}
                stale = [item for item in existing.items if str(item.id) not in kept_ids]
                if stale:
                    existing.remove_items(stale)
                    existing = self.add(existing)

                order._version = existing._version
                order.state_.mark_retrieved()

        return self.add(order)
