"""Inventory errors."""

from protean.exceptions import ValidationError


class InsufficientStockError(ValidationError):
    """Raised when a reservation asks for more units than are available."""

    def __init__(self, product_id, requested, available=None):
        self.product_id = str(product_id)
        self.requested = requested
        self.available = available

        detail = f"Insufficient stock for product {self.product_id}: {requested} requested"
        if available is not None:
            detail += f", {available} available"
        super().__init__({"quantity": [detail]})
