"""Application tests for the full place → confirm → ship lifecycle."""

import pytest
from bookstore.ordering.order import Order, OrderItem, OrderStatus
from protean.exceptions import ValidationError


class TestFullOrderLifecycle:
    def test_happy_path_to_shipped(self, order_service, order_repo, inventory_service, stock, customer, book):
        """Stock 10 → order 2 → place → confirm → ship → SHIPPED with 8 left."""
        stock(book.id, 10)
        order = Order.create(customer, [OrderItem.for_book(book, 2)])

        # 1. Place
        order_service.place_order(order)
        assert order_repo.find_by_id(order.id).status == OrderStatus.NEW.value

        # 2. Confirm
        order_service.confirm_order(order.id, "pay-001")
        assert order_repo.find_by_id(order.id).status == OrderStatus.CONFIRMED.value

        # 3. Ship
        order_service.ship_order(order.id)
        assert order_repo.find_by_id(order.id).status == OrderStatus.SHIPPED.value
        assert inventory_service.stock_level(book.id) == 8

    def test_shipping_twice_fails(self, order_service, order_repo, stock, customer, book):
        stock(book.id, 10)
        order = Order.create(customer, [OrderItem.for_book(book, 2)])
        order_service.place_order(order)
        order_service.confirm_order(order.id, "pay-001")
        order_service.ship_order(order.id)

        with pytest.raises(ValidationError) as exc_info:
            order_service.ship_order(order.id)

        assert "status" in exc_info.value.messages
        assert order_repo.find_by_id(order.id).status == OrderStatus.SHIPPED.value

    def test_second_shipment_attempt_still_consumes_stock(
        self, order_service, inventory_service, stock, customer, book
    ):
        """Stock is reserved before the status is checked, so a repeated ship uses stock up."""
        stock(book.id, 10)
        order = Order.create(customer, [OrderItem.for_book(book, 2)])
        order_service.place_order(order)
        order_service.confirm_order(order.id, "pay-001")
        order_service.ship_order(order.id)

        with pytest.raises(ValidationError):
            order_service.ship_order(order.id)

        assert inventory_service.stock_level(book.id) == 6

    def test_order_confirmed_even_when_stock_is_short(self, order_service, order_repo, stock, customer, book):
        """Stock is only checked when shipping."""
        stock(book.id, 1)
        order = Order.create(customer, [OrderItem.for_book(book, 2)])
        order_service.place_order(order)
        order_service.confirm_order(order.id, "pay-001")
        assert order_repo.find_by_id(order.id).status == OrderStatus.CONFIRMED.value
