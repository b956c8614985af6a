"""Flat-rate shipping cost for domestic and international orders."""

import os

DOMESTIC_COUNTRY = "USA"
DOMESTIC_RATE = 5.0
INTERNATIONAL_RATE = 15.0


class ShippingCostCalculator:
    """Prices shipping from the destination country alone.

    Orders shipping to ``domestic_country`` (exact match) pay
    ``domestic_rate``; every other destination pays ``international_rate``.
    """

    def __init__(
        self,
        domestic_country: str = DOMESTIC_COUNTRY,
        domestic_rate: float = DOMESTIC_RATE,
        international_rate: float = INTERNATIONAL_RATE,
    ) -> None:
        self.domestic_country = domestic_country
        self.domestic_rate = round(float(domestic_rate), 2)
        self.international_rate = round(float(international_rate), 2)

    @classmethod
    def from_env(cls) -> "ShippingCostCalculator":
        """Build a calculator, letting environment variables override the defaults."""
        return cls(
            domestic_country=os.environ.get("SHIPPING_DOMESTIC_COUNTRY", DOMESTIC_COUNTRY),
            domestic_rate=float(os.environ.get("SHIPPING_DOMESTIC_RATE", DOMESTIC_RATE)),
            international_rate=float(os.environ.get("SHIPPING_INTERNATIONAL_RATE", INTERNATIONAL_RATE)),
        )

    def calculate(self, order) -> float:
        if order.shipping_address.country == self.domestic_country:
            return self.domestic_rate
        return self.international_rate
