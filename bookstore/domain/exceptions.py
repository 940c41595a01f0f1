"""
Domain exceptions for the book store catalog.

Every rule violation raised by the domain layer is a subclass of
BookStoreError, so outer layers can catch them uniformly. The concrete
classes also derive from the matching built-in (ValueError or RuntimeError)
so callers that only know the standard library still handle them.
"""

from typing import Any


class BookStoreError(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(BookStoreError, ValueError):
    """
    A field value violates a format or content rule.

    Raised at construction or on assignment of a validated field. The
    instance is never left with the rejected value.
    """

    def __init__(self, field: str, reason: str = "is not valid") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class OutOfRangeError(BookStoreError, ValueError):
    """A numeric field was given a value outside its allowed range."""

    def __init__(self, field: str, value: Any = None, reason: str = "cannot be negative") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field} {reason}, got {value}")


class InvalidOperationError(BookStoreError, RuntimeError):
    """An operation is not available in the current state of the object."""
