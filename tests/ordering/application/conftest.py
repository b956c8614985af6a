import pytest
from bookstore.inventory.service import InventoryService
from bookstore.inventory.stock import InventoryItem, ProductType
from bookstore.ordering.order import Order
from bookstore.ordering.service import OrderService
from bookstore.ordering.shipping import ShippingCostCalculator
from bookstore.payments.mock_adapter import MockPaymentService
from protean import current_domain


@pytest.fixture()
def order_repo():
    return current_domain.repository_for(Order)


@pytest.fixture()
def inventory_repo():
    return current_domain.repository_for(InventoryItem)


@pytest.fixture()
def payments():
    return MockPaymentService()


@pytest.fixture()
def inventory_service(inventory_repo):
    return InventoryService(inventory_repo)


@pytest.fixture()
def order_service(order_repo, payments, inventory_service):
    return OrderService(order_repo, payments, inventory_service, ShippingCostCalculator())


@pytest.fixture()
def stock(inventory_repo):
    """Seed stock for a product: ``stock(product_id, quantity)``."""

    def _stock(product_id, quantity):
        inventory_repo.save(InventoryItem.stock(str(product_id), ProductType.BOOK, quantity))

    return _stock
