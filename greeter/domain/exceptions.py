"""
Domain Exceptions
=================

Errors raised by domain models when construction rules are violated.
"""
from typing import Iterable, Tuple


class MissingRequiredFieldError(ValueError):
    """Raised when a named-field record is built without one of its required fields."""

    def __init__(self, fields: Iterable[str]):
        self.fields: Tuple[str, ...] = tuple(fields)
        names = ", ".join(f"'{name}'" for name in self.fields)
        super().__init__(f"Missing required field(s): {names}")
