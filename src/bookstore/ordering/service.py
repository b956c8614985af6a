"""Order service: place, confirm and ship orders.

Every collaborator is handed in through the constructor: the order
repository, a payment service, the inventory service and (optionally) the
shipping cost calculator.

Shipping is not atomic across items. Stock reserved for earlier items stays
reserved when a later item runs short; callers must not assume a failed
``ship_order`` left inventory untouched.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from bookstore.inventory.errors import InsufficientStockError
from bookstore.ordering.shipping import ShippingCostCalculator

logger = structlog.get_logger(__name__)


class OrderService:
    def __init__(self, order_repository, payment_service, inventory_service, shipping_cost_calculator=None):
        self.order_repository = order_repository
        self.payment_service = payment_service
        self.inventory_service = inventory_service
        self.shipping_cost_calculator = shipping_cost_calculator or ShippingCostCalculator()

    def get_order(self, order_id):
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise ObjectNotFoundError({"_entity": f"Order {order_id} not found"})
        return order

    def place_order(self, order) -> float:
        """Store a new order and return its shipping cost.

        The shipping cost is informational: it is neither added to the
        order total nor stored on the order. Stock is not checked here.
        """
        shipping_cost = self.shipping_cost_calculator.calculate(order)
        logger.info(
            "Calculated shipping cost",
            order_id=str(order.id),
            country=order.shipping_address.country,
            shipping_cost=shipping_cost,
        )

        self.order_repository.save(order)
        logger.info("Order placed", order_id=str(order.id), total_amount=order.total_amount)
        return shipping_cost

    def confirm_order(self, order_id, payment_id):
        order = self.get_order(order_id)

        payment_confirmed = self.payment_service.verify_payment(str(payment_id), order.total_amount)
        try:
            order.confirm(payment_confirmed)
        except ValidationError as exc:
            logger.warning("Order confirmation rejected", order_id=str(order_id), errors=exc.messages)
            raise

        self.order_repository.save(order)
        logger.info("Order confirmed", order_id=str(order_id), payment_id=str(payment_id))
        return order

    def ship_order(self, order_id):
        order = self.get_order(order_id)

        for item in order.items:
            if not self.inventory_service.reserve_stock(item.book_id, item.quantity):
                raise InsufficientStockError(item.book_id, item.quantity)

        try:
            order.ship()
        except ValidationError as exc:
            logger.warning("Order shipment rejected", order_id=str(order_id), errors=exc.messages)
            raise

        self.order_repository.save(order)
        logger.info("Order shipped", order_id=str(order_id))
        return order
