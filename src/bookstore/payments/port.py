"""Payment service port (abstract interface).

Ordering only needs a yes/no answer: was this payment made for this
amount? Adapters decide how to find out.
"""

from abc import ABC, abstractmethod


class PaymentService(ABC):
    """Abstract payment verification interface."""

    @abstractmethod
    def verify_payment(self, payment_id: str, amount: float) -> bool:
        """Return True when ``payment_id`` covers ``amount``."""
        ...
