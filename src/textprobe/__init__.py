"""textprobe: classify strings and characters.

IPv4 dotted-decimal/integer conversion, fixed-pattern validators for
phone numbers, e-mail addresses, URLs and ID numbers, and CJK or
multibyte character detection.
"""

from textprobe.chars import (
    contains_chinese_character,
    contains_multibyte_character,
    is_cjk_character,
    is_multibyte_character,
    is_word_character,
)
from textprobe.utils.ip import format_ipv4, is_ip_literal, parse_ipv4
from textprobe.validators import is_email, is_id_card, is_mobile_number, is_url

__version__ = "0.1.0"

__all__ = [
    "contains_chinese_character",
    "contains_multibyte_character",
    "format_ipv4",
    "is_cjk_character",
    "is_email",
    "is_id_card",
    "is_ip_literal",
    "is_mobile_number",
    "is_multibyte_character",
    "is_url",
    "is_word_character",
    "parse_ipv4",
]
