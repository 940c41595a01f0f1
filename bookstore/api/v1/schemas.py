"""
Request and response models for the book item API.

Field rules (ISBN checksum, ISNI format, currency code, non-negative
numbers) are enforced by the domain layer, not here, so the API reports
them with the same field names the domain uses.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class BookItemCreate(BaseModel):
    """
    Raw field set for building a BookItem.
    """
    author_name: str = Field(description="Book author's name")
    title: str = Field(description="Book title")
    publisher: str = Field(description="Book publisher")
    isbn: str = Field(description="ISBN-10, e.g. '0306406152'")
    isni: str | None = Field(default=None, description="16-character ISNI of the author")
    published: datetime | None = Field(default=None, description="Publishing date")
    book_binding: str = Field(default="", description="Binding type (e.g. 'Paperback')")
    price: Decimal = Field(default=Decimal("0"), description="Price of one copy")
    currency: str = Field(default="USD", description="3-letter currency code")
    amount: int = Field(default=0, description="Copies in stock")


class BookItemUpdate(BaseModel):
    """
    Commercial fields to change after creation. Omitted fields are kept,
    an explicit null for published clears the date.
    """
    price: Decimal | None = None
    currency: str | None = None
    amount: int | None = None
    published: datetime | None = None
    book_binding: str = ""


# request body of post /book-items/preview
class BookItemPreviewRequest(BaseModel):
    item: BookItemCreate
    update: BookItemUpdate | None = Field(
        default=None,
        description="Optional update applied after the item is created"
    )


class BookItem(BaseModel):
    """
    API representation of a BookItem entity, with its derived values.
    """
    author_name: str
    title: str
    publisher: str
    isbn: str
    isni: str | None = None
    has_isni: bool = Field(description="True when the author has an ISNI")
    published: datetime | None = None
    book_binding: str = ""
    price: Decimal
    currency: str
    amount: int
    isni_uri: str | None = Field(default=None, description="isni.org page, null without ISNI")
    isbn_search_uri: str = Field(description="isbnsearch.org page")
    display: str = Field(description="Single-line human-readable summary")


class IsbnCheck(BaseModel):
    isbn: str
    valid: bool
    search_uri: str | None = Field(default=None, description="isbnsearch.org page when valid")


class FieldError(BaseModel):
    """Body of a 400 response caused by a rejected field."""
    field: str
    reason: str
