"""Customer aggregate with its shipping Address."""

from protean.fields import String, ValueObject

from bookstore.domain import bookstore
from bookstore.shared.address import Address
from bookstore.shared.email import EmailAddress


@bookstore.aggregate
class Customer:
    """A person who places orders.

    A customer has exactly one shipping address. Changing it replaces the
    whole value; orders already placed keep their own copy.
    """

    name = String(required=True, max_length=100)
    email = ValueObject(EmailAddress, required=True)
    shipping_address = ValueObject(Address, required=True)

    @classmethod
    def register(cls, name, email, shipping_address, customer_id=None):
        data = {
            "name": name,
            "email": EmailAddress(address=email),
            "shipping_address": shipping_address,
        }
        if customer_id is not None:
            data["id"] = customer_id
        return cls(**data)

    def relocate(self, address):
        """Replace the shipping address."""
        self.shipping_address = address
