"""
Validators for bibliographic identifiers and commercial codes.

All functions here are pure: they take a value and answer whether it is
well-formed. They never raise for bad input, the entity decides which
error to raise.

Identifier alphabet
-------------------
ISBN-10 and ISNI share the same alphabet: the digits 0-9 plus the letter
X (either case), where X stands for the value 10. An ISBN-10 is valid when

    sum(weight * value) % 11 == 0

with weights 10, 9, ..., 1 assigned left to right.
"""

from typing import Any, Optional

ISBN_LENGTH = 10
ISNI_LENGTH = 16
CURRENCY_CODE_LENGTH = 3

IDENTIFIER_ALPHABET = frozenset("0123456789Xx")


def is_identifier_char(ch: str) -> bool:
    """Check if a character belongs to the ISBN/ISNI alphabet."""
    return ch in IDENTIFIER_ALPHABET


def identifier_char_value(ch: str) -> int:
    """
    Numeric value of an identifier character.

    Args:
        ch: A character from IDENTIFIER_ALPHABET

    Returns:
        The digit value, or 10 for X/x

    Raises:
        ValueError: If ch is outside the identifier alphabet
    """
    if ch in ("X", "x"):
        return 10
    if ch not in IDENTIFIER_ALPHABET:
        raise ValueError(f"'{ch}' is not an identifier character")
    return int(ch)


def _has_identifier_format(value: Any, length: int) -> bool:
    if not isinstance(value, str) or len(value) != length:
        return False
    return all(is_identifier_char(ch) for ch in value)


def is_valid_isbn_format(isbn: Any) -> bool:
    """Check that isbn has 10 characters, all from the identifier alphabet."""
    return _has_identifier_format(isbn, ISBN_LENGTH)


def is_valid_isbn_checksum(isbn: str) -> bool:
    """
    Check the ISBN-10 weighted checksum.

    Only meaningful for values that already passed is_valid_isbn_format().
    """
    weights = range(ISBN_LENGTH, 0, -1)
    checksum = sum(w * identifier_char_value(ch) for w, ch in zip(weights, isbn))
    return checksum % 11 == 0


def is_valid_isbn(isbn: Any) -> bool:
    """Check ISBN-10 format and checksum. Format is checked first."""
    return is_valid_isbn_format(isbn) and is_valid_isbn_checksum(isbn)


def is_valid_isni(isni: Optional[str]) -> bool:
    """
    Check ISNI format.

    None is valid because the ISNI is optional. There is no checksum
    verification, only length and alphabet.
    """
    if isni is None:
        return True
    return _has_identifier_format(isni, ISNI_LENGTH)


def is_valid_currency(currency: Any) -> bool:
    """Check that currency is a 3-letter alphabetic code (any case)."""
    if not isinstance(currency, str) or len(currency) != CURRENCY_CODE_LENGTH:
        return False
    return all(ch.isalpha() for ch in currency)


def is_blank(text: Any) -> bool:
    """True for None, non-strings, empty or whitespace-only strings."""
    return not isinstance(text, str) or not text.strip()
