"""
Domain entities for the book store catalog.

A BookItem is a single catalog entry: who wrote the book, how it is
identified (ISBN-10 and optionally the author's ISNI), and the commercial
data the store changes over time (price, currency, stock amount).

The identity fields are fixed at construction. The commercial fields are
validated on every assignment, so no instance is ever observable in an
invalid state.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional
from urllib.parse import urljoin

from .exceptions import InvalidArgumentError, InvalidOperationError, OutOfRangeError
from .identifiers import (
    is_blank,
    is_valid_currency,
    is_valid_isbn_checksum,
    is_valid_isbn_format,
    is_valid_isni,
)

ISNI_BASE_URI = "https://isni.org/isni/"
ISBN_SEARCH_BASE_URI = "https://isbnsearch.org/isbn/"

ISNI_NOT_SET = "ISNI IS NOT SET"
QUOTED_PRICE_THRESHOLD = Decimal("1000")

DEFAULT_CURRENCY = "USD"

_CENTS = Decimal("0.01")


def _to_price(value: Any) -> Decimal:
    """Convert a price input to Decimal, rejecting non-numeric values."""
    if isinstance(value, bool):
        raise InvalidArgumentError("price", "must be a number")
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            # str() keeps 15.5 as Decimal("15.5") instead of the binary float
            price = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidArgumentError("price", "must be a number") from None

    if not price.is_finite():
        raise InvalidArgumentError("price", "must be a finite number")
    if price < 0:
        raise OutOfRangeError("price", value)
    if price == 0:
        # -0.00 compares equal to zero but keeps its sign
        price = abs(price)
    return price


def _check_amount(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError("amount", "must be an integer")
    if value < 0:
        raise OutOfRangeError("amount", value)
    return value


def _check_currency(value: Any) -> str:
    if not is_valid_currency(value):
        raise InvalidArgumentError("currency", "must be a 3-letter alphabetic code")
    return value


def format_price(price: Decimal) -> str:
    """
    Format a price with two decimals and comma thousands separators.

    The output does not depend on the host locale: 1500 -> '1,500.00'.
    Midpoints round away from zero. Any magnitude is accepted, the
    precision grows with the integer part.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, price.adjusted() + 3)
        return f"{price.quantize(_CENTS, rounding=ROUND_HALF_UP):,.2f}"


def isbn_search_uri(isbn: str) -> str:
    """Link to the publication page at isbnsearch.org for isbn."""
    return urljoin(ISBN_SEARCH_BASE_URI, isbn)


class BookItem:
    """
    Represents an item in a book store.

    Required identity fields are validated in a fixed order and the first
    violation aborts construction:
    author_name, title, publisher, isni, isbn, currency, then the
    price and amount guards.

    Example:
        >>> item = BookItem("Bill Wagner", "Effective C#", "Addison-Wesley",
        ...                 "0321245660", price=Decimal("15.50"), amount=3)
        >>> str(item)
        'Effective C#, Bill Wagner, ISNI IS NOT SET, 15.50 USD, 3'
    """

    def __init__(
        self,
        author_name: str,
        title: str,
        publisher: str,
        isbn: str,
        isni: Optional[str] = None,
        published: Optional[datetime] = None,
        book_binding: str = "",
        price: Any = Decimal("0"),
        currency: str = DEFAULT_CURRENCY,
        amount: int = 0,
    ) -> None:
        """
        Create a validated catalog item.

        Args:
            author_name: Book author's name
            title: Book title
            publisher: Book publisher
            isbn: ISBN-10 of the book
            isni: Optional 16-character ISNI of the author
            published: Publishing date
            book_binding: Binding type (e.g. 'Paperback')
            price: Price, stored as Decimal
            currency: 3-letter currency code
            amount: Number of copies in stock

        Raises:
            InvalidArgumentError: If a text, identifier or currency rule fails
            OutOfRangeError: If price or amount is negative
        """
        if is_blank(author_name):
            raise InvalidArgumentError("author_name", "cannot be empty")
        if is_blank(title):
            raise InvalidArgumentError("title", "cannot be empty")
        if is_blank(publisher):
            raise InvalidArgumentError("publisher", "cannot be empty")
        if not is_valid_isni(isni):
            raise InvalidArgumentError("isni", "must be 16 characters of 0-9 or X")
        if not (is_valid_isbn_format(isbn) and is_valid_isbn_checksum(isbn)):
            raise InvalidArgumentError("isbn", "is not a valid ISBN-10")

        checked_currency = _check_currency(currency)
        checked_price = _to_price(price)
        checked_amount = _check_amount(amount)

        self._author_name = author_name
        self._isni = isni
        self._has_isni = isni is not None
        self._title = title
        self._publisher = publisher
        self._isbn = isbn
        self.published = published
        self.book_binding = book_binding
        self._price = checked_price
        self._currency = checked_currency
        self._amount = checked_amount

    @property
    def author_name(self) -> str:
        """Book author's name."""
        return self._author_name

    @property
    def isni(self) -> Optional[str]:
        """International Standard Name Identifier of the author, if known."""
        return self._isni

    @property
    def has_isni(self) -> bool:
        return self._has_isni

    @property
    def title(self) -> str:
        return self._title

    @property
    def publisher(self) -> str:
        return self._publisher

    @property
    def isbn(self) -> str:
        """International Standard Book Number (ISBN-10)."""
        return self._isbn

    @property
    def price(self) -> Decimal:
        """Amount of money the book costs. Never negative."""
        return self._price

    @price.setter
    def price(self, value: Any) -> None:
        self._price = _to_price(value)

    @property
    def currency(self) -> str:
        """3-letter price currency code."""
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        self._currency = _check_currency(value)

    @property
    def amount(self) -> int:
        """Number of copies in the store's stock. Never negative."""
        return self._amount

    @amount.setter
    def amount(self, value: int) -> None:
        self._amount = _check_amount(value)

    def get_isni_uri(self) -> str:
        """
        Link to the contributor's page at isni.org.

        Returns:
            'https://isni.org/isni/<isni>'

        Raises:
            InvalidOperationError: If the item has no ISNI (check has_isni first)
        """
        if self._isni is None:
            raise InvalidOperationError("isni is not set")
        return urljoin(ISNI_BASE_URI, self._isni)

    def get_isbn_search_uri(self) -> str:
        """Link to the publication page at isbnsearch.org."""
        return isbn_search_uri(self._isbn)

    def __str__(self) -> str:
        head = f"{self.title}, {self.author_name}"
        price_text = format_price(self.price)

        # Above the threshold the ISNI segment is always the marker, even
        # when an ISNI is set.
        if self.price > QUOTED_PRICE_THRESHOLD:
            return f'{head}, {ISNI_NOT_SET}, "{price_text}" {self.currency}, {self.amount}'

        if self.isni is None:
            return f"{head}, {ISNI_NOT_SET}, {price_text} {self.currency}, {self.amount}"

        return f"{head}, {self.isni}, {price_text} {self.currency}, {self.amount}"

    def __repr__(self) -> str:
        return (
            f"BookItem(author_name={self.author_name!r}, title={self.title!r}, "
            f"publisher={self.publisher!r}, isbn={self.isbn!r}, isni={self.isni!r})"
        )
