"""
FastAPI dependencies for dependency injection.

This module reads configuration from the environment and provides
singleton instances of services for use with FastAPI's Depends() system.
"""

import os
from typing import Optional

from bookstore.domain.services import BookItemService

# Configuration from environment
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_TITLE = os.getenv("API_TITLE", "Book Store Catalog API")

# Module-level singletons (initialized lazily)
_book_item_service: Optional[BookItemService] = None


def get_book_item_service() -> BookItemService:
    """Provide a singleton instance of the book item service."""
    global _book_item_service
    if _book_item_service is None:
        _book_item_service = BookItemService()
    return _book_item_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.
    """
    global _book_item_service

    _book_item_service = None
