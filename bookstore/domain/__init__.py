"""
Domain layer - Core business logic and entities.

This layer contains the BookItem entity, the identifier validators and
the domain exceptions.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import BookItem
from .exceptions import (
    BookStoreError,
    InvalidArgumentError,
    InvalidOperationError,
    OutOfRangeError,
)
from .services import BookItemService

__all__ = [
    # Entities
    "BookItem",
    # Services
    "BookItemService",
    # Exceptions
    "BookStoreError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "OutOfRangeError",
]
