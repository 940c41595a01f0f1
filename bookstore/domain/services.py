"""
Domain services for the book store catalog.

Services orchestrate use cases around a BookItem that don't belong to the
entity itself: building an item from a raw field set supplied by an outer
layer, and applying a commercial update to an existing item.
"""

from copy import copy
from datetime import datetime
from typing import Any, Optional
import logging

from .entities import BookItem
from .exceptions import BookStoreError

logger = logging.getLogger(__name__)

# Marks an apply_update argument that was not passed
_UNSET: Any = object()


class BookItemService:
    """
    Creates and updates catalog items.

    The service holds no state, nothing is stored between calls.
    """

    def create_item(self, **fields: Any) -> BookItem:
        """
        Build a BookItem from keyword fields.

        Args:
            **fields: Constructor arguments of BookItem

        Returns:
            The validated BookItem

        Raises:
            BookStoreError: If any field is rejected
        """
        try:
            item = BookItem(**fields)
        except BookStoreError as e:
            logger.info("Rejected book item: %s", e)
            raise

        logger.debug("Created book item %r", item)
        return item

    def apply_update(
        self,
        item: BookItem,
        *,
        price: Any = _UNSET,
        currency: str = _UNSET,
        amount: int = _UNSET,
        published: Optional[datetime] = _UNSET,
        book_binding: str = _UNSET,
    ) -> BookItem:
        """
        Assign the supplied commercial fields to item.

        Fields that are not passed are not touched; published=None clears
        the publishing date. The update is all-or-nothing:
        it is first applied to a shallow copy, and only once every field
        has been accepted is it applied to item.

        Args:
            item: Item to update in place
            price: New price
            currency: New 3-letter currency code
            amount: New stock amount
            published: New publishing date, or None to clear it
            book_binding: New binding type

        Returns:
            The same item, updated

        Raises:
            BookStoreError: If any field is rejected; item is unchanged
        """
        changes = {
            name: value
            for name, value in (
                ("price", price),
                ("currency", currency),
                ("amount", amount),
                ("published", published),
                ("book_binding", book_binding),
            )
            if value is not _UNSET
        }
        if not changes:
            return item

        scratch = copy(item)
        try:
            for name, value in changes.items():
                setattr(scratch, name, value)
        except BookStoreError as e:
            logger.info("Rejected update for %s: %s", item.isbn, e)
            raise

        for name, value in changes.items():
            setattr(item, name, value)

        logger.debug("Updated %s: %s", item.isbn, ", ".join(changes))
        return item
