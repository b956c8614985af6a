"""ISBN value object for book identifiers."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from bookstore.domain import bookstore

_SEPARATORS = re.compile(r"[\s-]")


def normalize_isbn(value: str) -> str:
    """Strip hyphens and spaces, upper-casing a trailing ISBN-10 check character."""
    return _SEPARATORS.sub("", value or "").upper()


@bookstore.value_object
class ISBN:
    """International Standard Book Number.

    Accepts the 10- and 13-digit forms, with or without hyphens or spaces.
    An ISBN-10 may end with ``X``. Check digits are not verified.
    E.g., "9780134494166", "978-0-13-449416-6", "0-321-12521-5"
    """

    value = String(required=True, max_length=17)

    @invariant.post
    def value_must_have_10_or_13_digits(self):
        digits = normalize_isbn(self.value)

        if re.fullmatch(r"\d{13}", digits) or re.fullmatch(r"\d{9}[\dX]", digits):
            return

        raise ValidationError({"value": [f"Invalid ISBN: {self.value!r}"]})

    @property
    def normalized(self) -> str:
        return normalize_isbn(self.value)
