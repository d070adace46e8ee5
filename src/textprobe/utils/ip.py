"""IPv4 dotted-decimal <-> integer conversion and literal matching."""

from __future__ import annotations

import re

_IP_LITERAL_RE = re.compile(r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}', re.ASCII)
_DIGITS_RE = re.compile(r'[0-9]+')

# Everything at or below U+0020 counts as trimmable whitespace.
_TRIM_CHARS = ''.join(chr(c) for c in range(0x21))

_MAX_GROUP = 2 ** 63 - 1
_MASK_32 = 0xFFFFFFFF


def _parse_group(part: str) -> int | None:
    part = part.strip(_TRIM_CHARS)
    if not _DIGITS_RE.fullmatch(part):
        return None
    # A 64-bit value has at most 19 significant digits.
    digits = part.lstrip('0')
    if len(digits) > 19:
        return None
    value = int(digits or '0')
    if value > _MAX_GROUP:
        return None
    return value


def parse_ipv4(text: str, strict: bool = False) -> int | None:
    """Convert a dotted-decimal IPv4 address to its integer value.

    Returns None when the text does not contain four numeric groups.
    Groups may be padded with whitespace. Octets above 255 are folded
    in unchecked unless strict is set, so the result can exceed 32 bits.

    >>> parse_ipv4('192.168.1.1')
    3232235777
    >>> parse_ipv4(' 10 . 0 . 0 . 1 ')
    167772161
    >>> parse_ipv4('1.2.3') is None
    True
    >>> parse_ipv4('999.0.0.1')
    16760438785
    >>> parse_ipv4('999.0.0.1', strict=True) is None
    True
    """
    p1 = text.find('.')
    if p1 < 0:
        return None
    p2 = text.find('.', p1 + 1)
    if p2 < 0:
        return None
    p3 = text.find('.', p2 + 1)
    if p3 < 0:
        return None

    octets = []
    for part in (text[:p1], text[p1 + 1:p2], text[p2 + 1:p3], text[p3 + 1:]):
        value = _parse_group(part)
        if value is None:
            return None
        if strict and value > 255:
            return None
        octets.append(value)

    return (octets[0] << 24) + (octets[1] << 16) + (octets[2] << 8) + octets[3]


def format_ipv4(value: int) -> str:
    """Convert an integer to dotted-decimal IPv4 notation.

    Only the low 32 bits of value are used.

    >>> format_ipv4(3232235777)
    '192.168.1.1'
    >>> format_ipv4(0)
    '0.0.0.0'
    >>> format_ipv4(-1)
    '255.255.255.255'
    """
    value &= _MASK_32
    return '.'.join((
        str(value >> 24),
        str((value & 0x00FFFFFF) >> 16),
        str((value & 0x0000FFFF) >> 8),
        str(value & 0x000000FF),
    ))


def is_ip_literal(text: str) -> bool:
    """Check if text looks like an IPv4 address (four 1-3 digit groups).

    Octet values are not range checked.

    >>> is_ip_literal('10.1.10.1')
    True
    >>> is_ip_literal('999.999.999.999')
    True
    >>> is_ip_literal('10.1.10')
    False
    """
    return _IP_LITERAL_RE.fullmatch(text) is not None
