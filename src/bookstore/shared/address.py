"""Address value object for shipping destinations."""

from protean.fields import String

from bookstore.domain import bookstore


@bookstore.value_object
class Address:
    """A postal address.

    Immutable: a customer who moves gets a new Address, and an order keeps
    the address it was placed with.
    """

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
