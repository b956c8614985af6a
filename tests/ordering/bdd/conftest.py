"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from bookstore.inventory.errors import InsufficientStockError
from bookstore.inventory.service import InventoryService
from bookstore.inventory.stock import InventoryItem, ProductType
from bookstore.ordering.order import Order, OrderItem, OrderStatus
from bookstore.ordering.service import OrderService
from bookstore.payments.mock_adapter import MockPaymentService
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def payments():
    return MockPaymentService()


@pytest.fixture()
def inventory_service():
    return InventoryService(current_domain.repository_for(InventoryItem))


@pytest.fixture()
def order_service(payments, inventory_service):
    return OrderService(current_domain.repository_for(Order), payments, inventory_service)


@pytest.fixture()
def error():
    """Holds the exception raised by the last When step, if any."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the inventory holds {quantity:d} copies of the book"))
def seeded_inventory(book, quantity):
    current_domain.repository_for(InventoryItem).save(InventoryItem.stock(str(book.id), ProductType.BOOK, quantity))


@given(parsers.cfparse("an order for {quantity:d} copies of the book"), target_fixture="order")
def order_for_book(customer, book, quantity):
    return Order.create(customer, [OrderItem.for_book(book, quantity)])


@given("the payment provider declines payments")
def declining_payments(payments):
    payments.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    stored = current_domain.repository_for(Order).find_by_id(order.id)
    assert stored.status == OrderStatus[status].value


@then(parsers.cfparse("the inventory holds {quantity:d} copies of the book"))
def inventory_holds(inventory_service, book, quantity):
    assert inventory_service.stock_level(book.id) == quantity


@then("the action fails with a validation error")
def fails_with_validation_error(error):
    assert isinstance(error.get("exc"), ValidationError)


@then("the action fails with insufficient stock")
def fails_with_insufficient_stock(error):
    assert isinstance(error.get("exc"), InsufficientStockError)


@then("the action fails because the order does not exist")
def fails_with_not_found(error):
    assert isinstance(error.get("exc"), ObjectNotFoundError)
