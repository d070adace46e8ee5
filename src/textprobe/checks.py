"""Named check registry and aggregated check results.

Ties the individual predicates together so they can be selected by
name (from the config file or the command line) and reported on as a
group.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from dataclasses import dataclass, field

import jinja2

from textprobe.chars import (
    contains_chinese_character,
    contains_multibyte_character,
    is_cjk_character,
    is_multibyte_character,
    is_word_character,
    unicode_block,
)
from textprobe.utils.ip import is_ip_literal, parse_ipv4
from textprobe.validators import is_email, is_id_card, is_mobile_number, is_url


def is_ipv4(text: str, strict: bool = False) -> bool:
    """True if text parses as a dotted-decimal IPv4 address."""
    return parse_ipv4(text, strict=strict) is not None


CHECKS: dict[str, Callable[..., bool]] = {
    "ip_literal": is_ip_literal,
    "ipv4": is_ipv4,
    "mobile_number": is_mobile_number,
    "email": is_email,
    "url": is_url,
    "id_card": is_id_card,
    "chinese": contains_chinese_character,
    "multibyte": contains_multibyte_character,
}

# Checks whose predicate takes a strict keyword.
STRICT_CHECKS = frozenset({"ipv4"})

CHAR_CHECKS: dict[str, Callable[[str], bool]] = {
    "word": is_word_character,
    "multibyte": is_multibyte_character,
    "cjk": is_cjk_character,
}

_REPORT_TEMPLATE = jinja2.Template("""\
{{ text }}
{% for result in results %}
  {{ "%-14s"|format(result.check) }} {{ "yes" if result.matched else "no" }}
{% endfor %}
""", trim_blocks=True)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of running one named check against one string."""

    check: str
    text: str
    matched: bool

    def __str__(self) -> str:
        verdict = "yes" if self.matched else "no"
        return f"{self.check}: {verdict}"


@dataclass
class CheckReport:
    """All check results for a single input string."""

    text: str
    results: list[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        self.results.append(result)

    @property
    def matched(self) -> list[CheckResult]:
        return [r for r in self.results if r.matched]

    @property
    def unmatched(self) -> list[CheckResult]:
        return [r for r in self.results if not r.matched]

    @property
    def has_matches(self) -> bool:
        return any(r.matched for r in self.results)

    def report(self, show_unmatched: bool = True) -> str:
        """Render a human-readable table of check outcomes."""
        results = self.results if show_unmatched else self.matched
        return _REPORT_TEMPLATE.render(text=self.text, results=results)


@dataclass(frozen=True)
class CharacterInfo:
    """Classification of a single character."""

    char: str
    block: str | None
    flags: dict[str, bool]

    @property
    def code_point(self) -> str:
        return f"U+{ord(self.char):04X}"


def run_checks(
    text: str,
    names: list[str] | None = None,
    strict_ipv4: bool = False,
) -> CheckReport:
    """Run the named checks (default: all) against text.

    Raises KeyError for an unknown check name.
    """
    if names is None:
        names = list(CHECKS)

    report = CheckReport(text=text)
    for name in names:
        check = CHECKS[name]
        if name in STRICT_CHECKS:
            check = partial(check, strict=strict_ipv4)
        report.add(CheckResult(check=name, text=text, matched=check(text)))
    return report


def classify_characters(text: str) -> list[CharacterInfo]:
    """Classify each character of text with every character check."""
    return [
        CharacterInfo(
            char=ch,
            block=unicode_block(ch),
            flags={name: check(ch) for name, check in CHAR_CHECKS.items()},
        )
        for ch in text
    ]
