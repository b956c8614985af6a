"""Bookstore demonstration run.

Seeds one book's stock, builds a customer and an order for that book, then
places, confirms and ships the order and prints its final status.

Usage:
    bookstore-demo
    bookstore-demo --stock 1 --quantity 2   # fails with InsufficientStockError
"""

import argparse
import sys
from uuid import uuid4

from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore, logger
from bookstore.identity.customer import Customer
from bookstore.inventory.service import InventoryService
from bookstore.inventory.stock import InventoryItem, ProductType
from bookstore.ordering.order import Order, OrderItem, OrderStatus
from bookstore.ordering.service import OrderService
from bookstore.ordering.shipping import ShippingCostCalculator
from bookstore.payments.factory import build_payment_service
from bookstore.shared.address import Address
from bookstore.utils.logging import add_context, clear_context


def build_order_service(domain=None):
    """Wire an OrderService to the active domain's repositories.

    Must be called inside a domain context.
    """
    domain = domain or current_domain
    return OrderService(
        order_repository=domain.repository_for(Order),
        payment_service=build_payment_service(),
        inventory_service=InventoryService(domain.repository_for(InventoryItem)),
        shipping_cost_calculator=ShippingCostCalculator.from_env(),
    )


def run(stock=10, quantity=2, domain=None):
    """Run place → confirm → ship and return the final status name."""
    domain = domain or current_domain
    order_service = build_order_service(domain)

    book_id = str(uuid4())
    domain.repository_for(InventoryItem).save(InventoryItem.stock(book_id, ProductType.BOOK, stock))

    customer = Customer.register(
        name="John Doe",
        email="john@example.com",
        shipping_address=Address(
            street="123 Elm Street",
            city="Springfield",
            state="IL",
            postal_code="62704",
            country="USA",
        ),
    )
    book = Book.publish(
        title="Clean Architecture",
        author="Robert C. Martin",
        price=50,
        isbn="9780134494166",
        book_id=book_id,
    )
    order = Order.create(customer, [OrderItem.for_book(book, quantity)])

    order_service.place_order(order)
    order_service.confirm_order(order.id, uuid4())
    order_service.ship_order(order.id)

    shipped = order_service.get_order(order.id)
    return OrderStatus(shipped.status).name


def main(argv=None):
    parser = argparse.ArgumentParser(description="Place, confirm and ship a demo bookstore order")
    parser.add_argument("--stock", type=int, default=10, help="Units of the book in stock (default: 10)")
    parser.add_argument("--quantity", type=int, default=2, help="Copies to order (default: 2)")
    args = parser.parse_args(argv)

    add_context(run_id=uuid4().hex[:8])
    try:
        bookstore.init()
        with bookstore.domain_context():
            status = run(stock=args.stock, quantity=args.quantity)
    finally:
        clear_context()

    logger.info("Demo finished", status=status)
    print(f"Final order status: {status}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
