"""Character classification: word, multibyte and CJK characters.

Functions named is_*_character take a single-character string and
return False for anything longer or shorter. The contains_* functions
scan a whole string.
"""

from __future__ import annotations

import re

_CHINESE_RE = re.compile(r"[\u4e00-\u9fa5]")
_NON_LATIN1_RE = re.compile(r'[^\x00-\xff]')
_WORD_RE = re.compile(r'\w', re.ASCII)

# (first, last, name) for the Unicode blocks treated as CJK text.
CJK_BLOCKS: tuple[tuple[int, int, str], ...] = (
    (0x2000, 0x206F, "General Punctuation"),
    (0x3000, 0x303F, "CJK Symbols and Punctuation"),
    (0x3400, 0x4DBF, "CJK Unified Ideographs Extension A"),
    (0x4E00, 0x9FFF, "CJK Unified Ideographs"),
    (0xF900, 0xFAFF, "CJK Compatibility Ideographs"),
    (0xFF00, 0xFFEF, "Halfwidth and Fullwidth Forms"),
)


def contains_chinese_character(text: str) -> bool:
    """True if text contains a common Chinese ideograph (U+4E00..U+9FA5).

    Chinese punctuation is not counted.

    >>> contains_chinese_character('hello')
    False
    >>> contains_chinese_character('hello 你好')
    True
    """
    return _CHINESE_RE.search(text) is not None


def contains_multibyte_character(text: str) -> bool:
    """True if text contains any character outside Latin-1 (above U+00FF).

    >>> contains_multibyte_character('café')
    False
    >>> contains_multibyte_character('naïve – dash')
    True
    """
    return _NON_LATIN1_RE.search(text) is not None


def is_word_character(ch: str) -> bool:
    """True for a-z, A-Z, 0-9 and underscore."""
    if len(ch) != 1:
        return False
    return _WORD_RE.fullmatch(ch) is not None


def is_multibyte_character(ch: str) -> bool:
    """True if ch needs more than one byte in UTF-8.

    Characters that cannot be encoded (lone surrogates) return False.

    >>> is_multibyte_character('a')
    False
    >>> is_multibyte_character('é')
    True
    """
    if len(ch) != 1:
        return False
    try:
        return len(ch.encode('utf-8')) > 1
    except UnicodeEncodeError:
        return False


def unicode_block(ch: str) -> str | None:
    """Return the name of the CJK-related block containing ch, if any.

    >>> unicode_block('中')
    'CJK Unified Ideographs'
    >>> unicode_block('a') is None
    True
    """
    if len(ch) != 1:
        return None
    code = ord(ch)
    for first, last, name in CJK_BLOCKS:
        if first <= code <= last:
            return name
    return None


def is_cjk_character(ch: str) -> bool:
    """True for CJK ideographs and CJK or general punctuation.

    >>> is_cjk_character('中')
    True
    >>> is_cjk_character('，')
    True
    >>> is_cjk_character('a')
    False
    """
    return unicode_block(ch) is not None
