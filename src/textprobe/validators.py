"""Fixed-pattern validators for identifiers found in free text.

Each validator matches the whole string. Patterns are deliberately
permissive: they check shape only, never checksums or existence.
"""

from __future__ import annotations

import re

_MOBILE_RE = re.compile(r'(?:\+?86)?1\d{10}', re.ASCII)

# Local part: alphanumerics joined by single '-', '|' or '.' separators,
# at least two characters long.
_EMAIL_RE = re.compile(
    r'[a-z0-9A-Z](?:[-|.]?[a-z0-9A-Z])+'
    r'@([a-z0-9A-Z]+(-[a-z0-9A-Z]+)?\.)+[a-zA-Z]{2,}'
)

_URL_RE = re.compile(r'https?://([\w-]+\.)+[\w-]+(/[\w\- ./?%&=]*)?', re.ASCII)

_ID_CARD_RE = re.compile(r'\d{18}|\d{15}', re.ASCII)


def is_mobile_number(text: str) -> bool:
    """Check for a mainland China mobile number, optionally +86 prefixed.

    >>> is_mobile_number('13800000000')
    True
    >>> is_mobile_number('+8613800000000')
    True
    >>> is_mobile_number('12345')
    False
    """
    return _MOBILE_RE.fullmatch(text) is not None


def is_email(text: str) -> bool:
    """Check for a local@domain.tld shaped e-mail address.

    >>> is_email('first.last@mail.example.com')
    True
    >>> is_email('a@example.com')
    False
    """
    return _EMAIL_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    """Check for an http or https URL with a dotted host."""
    return _URL_RE.fullmatch(text) is not None


def is_id_card(text: str) -> bool:
    """Check for a 15 or 18 digit resident ID number.

    Only the digit count is checked. IDs ending in 'X' are rejected.

    >>> is_id_card('123456789012345678')
    True
    >>> is_id_card('1234567890123456789')
    False
    """
    return _ID_CARD_RE.fullmatch(text) is not None
