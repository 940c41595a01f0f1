"""
API endpoints for book catalog items.

This module defines the FastAPI routes for previewing a catalog item and
checking ISBNs. It handles HTTP concerns and delegates to domain services.
Nothing is persisted between requests.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from bookstore.domain.exceptions import InvalidArgumentError, OutOfRangeError
from bookstore.domain.services import BookItemService
from bookstore.api.v1 import schemas as api
from bookstore.api.v1.converters import (
    api_create_to_domain_fields,
    api_update_to_domain_fields,
    domain_book_item_to_api,
    domain_error_to_api,
    isbn_to_api_check,
)
from bookstore.api.v1.dependencies import get_book_item_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/book-items/preview", response_model=api.BookItem)
def preview_book_item(
    request: api.BookItemPreviewRequest,
    service: BookItemService = Depends(get_book_item_service),
) -> api.BookItem:
    """
    Build a catalog item, optionally update it, and return its full view.

    Args:
        request: Item fields and an optional commercial update

    Returns:
        The validated item with its lookup links and rendered summary

    Raises:
        400: A field was rejected (body names the field and the reason)
    """
    try:
        item = service.create_item(**api_create_to_domain_fields(request.item))
        service.apply_update(item, **api_update_to_domain_fields(request.update))
        return domain_book_item_to_api(item)
    except (InvalidArgumentError, OutOfRangeError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=domain_error_to_api(e).model_dump(),
        )


@router.get("/isbn/{isbn}", response_model=api.IsbnCheck)
def check_isbn(isbn: str) -> api.IsbnCheck:
    """
    Check an ISBN-10 for format and checksum.

    Returns:
        Whether it is valid and, if so, its isbnsearch.org link
    """
    result = isbn_to_api_check(isbn)
    if not result.valid:
        logger.debug("Invalid ISBN checked: %s", isbn)
    return result


@router.get("/health")
def health_check() -> dict:
    """Liveness check."""
    return {"status": "ok"}
