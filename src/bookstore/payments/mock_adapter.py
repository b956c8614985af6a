"""Mock payment service for development and testing.

Approves every payment unless told otherwise, and records each call so
tests can check what was asked.
"""

from bookstore.payments.port import PaymentService


class MockPaymentService(PaymentService):
    """Configurable stand-in for a real payment provider."""

    def __init__(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool) -> None:
        """Configure verification outcome at runtime."""
        self.should_succeed = should_succeed

    def verify_payment(self, payment_id: str, amount: float) -> bool:
        self.calls.append(
            {
                "method": "verify_payment",
                "payment_id": str(payment_id),
                "amount": amount,
            }
        )
        return self.should_succeed
