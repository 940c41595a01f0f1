"""
Converters between domain entities and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from bookstore.domain import entities as domain
from bookstore.domain.exceptions import InvalidArgumentError, OutOfRangeError
from bookstore.domain.identifiers import is_valid_isbn
from bookstore.api.v1 import schemas as api


def api_create_to_domain_fields(request: api.BookItemCreate) -> dict:
    """
    Convert an API create request into BookItem constructor arguments.

    Args:
        request: API BookItemCreate model

    Returns:
        Keyword arguments for BookItem / BookItemService.create_item
    """
    return request.model_dump()


def api_update_to_domain_fields(update: api.BookItemUpdate | None) -> dict:
    """
    Keyword arguments for BookItemService.apply_update.

    Only fields present in the request body are passed, so an explicit
    null (e.g. "published": null) reaches the service while an omitted
    field is left unchanged.
    """
    if update is None:
        return {}
    return update.model_dump(exclude_unset=True)


def domain_book_item_to_api(item: domain.BookItem) -> api.BookItem:
    """
    Convert a domain BookItem entity to an API BookItem model.

    Args:
        item: Domain BookItem entity

    Returns:
        API BookItem model including links and the rendered summary
    """
    return api.BookItem(
        author_name=item.author_name,
        title=item.title,
        publisher=item.publisher,
        isbn=item.isbn,
        isni=item.isni,
        has_isni=item.has_isni,
        published=item.published,
        book_binding=item.book_binding,
        price=item.price,
        currency=item.currency,
        amount=item.amount,
        isni_uri=item.get_isni_uri() if item.has_isni else None,
        isbn_search_uri=item.get_isbn_search_uri(),
        display=str(item),
    )


def isbn_to_api_check(isbn: str) -> api.IsbnCheck:
    """Report whether isbn is a valid ISBN-10 and, if so, its search link."""
    if not is_valid_isbn(isbn):
        return api.IsbnCheck(isbn=isbn, valid=False)
    return api.IsbnCheck(
        isbn=isbn,
        valid=True,
        search_uri=domain.isbn_search_uri(isbn),
    )


def domain_error_to_api(error: InvalidArgumentError | OutOfRangeError) -> api.FieldError:
    """Convert a rejected-field error to the body of an error response."""
    return api.FieldError(field=error.field, reason=error.reason)
