"""Payment service selection."""

import os

from bookstore.payments.mock_adapter import MockPaymentService
from bookstore.payments.port import PaymentService


def build_payment_service(adapter: str | None = None) -> PaymentService:
    """Return a new payment service.

    ``adapter`` defaults to the PAYMENT_ADAPTER environment variable, then
    to "mock", the only adapter available.
    """
    adapter = adapter or os.environ.get("PAYMENT_ADAPTER", "mock")
    if adapter == "mock":
        return MockPaymentService()
    raise ValueError(f"Unknown payment adapter: {adapter}")
