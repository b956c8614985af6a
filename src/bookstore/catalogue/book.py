"""Book aggregate: a title offered for sale."""

from protean.fields import Float, String, ValueObject

from bookstore.catalogue.isbn import ISBN
from bookstore.domain import bookstore


@bookstore.aggregate
class Book:
    """A book in the catalogue.

    Orders never hold on to a Book: they copy its id, title, ISBN and price
    into an OrderItem when the order is built.
    """

    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    isbn = ValueObject(ISBN, required=True)

    @classmethod
    def publish(cls, title, author, price, isbn, book_id=None):
        """Build a Book from plain values, wrapping ``isbn`` in its value object."""
        data = {
            "title": title,
            "author": author,
            "price": round(float(price), 2),
            "isbn": isbn if isinstance(isbn, ISBN) else ISBN(value=isbn),
        }
        if book_id is not None:
            data["id"] = book_id
        return cls(**data)
