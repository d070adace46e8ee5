"""Load textprobe configuration from textprobe.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from textprobe.checks import CHECKS

DEFAULT_CONFIG_PATH = Path("textprobe.toml")


@dataclass
class IPv4Config:
    """IPv4 parsing options.

    strict rejects octets above 255 instead of folding them into the
    integer result.
    """

    strict: bool = False


@dataclass
class ReportConfig:
    """Options for the check report output."""

    show_unmatched: bool = True


@dataclass
class ProbeConfig:
    """Full configuration loaded from textprobe.toml."""

    checks: list[str] = field(default_factory=lambda: list(CHECKS))
    ipv4: IPv4Config = field(default_factory=IPv4Config)
    report: ReportConfig = field(default_factory=ReportConfig)


def _section(data: dict, name: str) -> dict:
    """Return a top-level table, rejecting non-table values."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, not {type(section).__name__}")
    return section


def _build_checks(data: dict) -> list[str]:
    """Build the list of enabled check names from parsed TOML data."""
    enabled = _section(data, "checks").get("enabled")
    if enabled is None:
        return list(CHECKS)
    if not isinstance(enabled, list):
        raise ValueError("checks.enabled must be a list of check names")
    return [str(name).strip() for name in enabled]


def load_config(config_path: Path | str | None = None) -> ProbeConfig:
    """Load configuration from a TOML file.

    If config_path is None, looks for textprobe.toml in the current
    directory. Check names are not validated here; unknown names are
    reported when the checks run.

    Raises FileNotFoundError for a missing file and ValueError (including
    tomllib.TOMLDecodeError) for malformed contents.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return ProbeConfig(
        checks=_build_checks(data),
        ipv4=IPv4Config(
            strict=bool(_section(data, "ipv4").get("strict", False)),
        ),
        report=ReportConfig(
            show_unmatched=bool(_section(data, "report").get("show_unmatched", True)),
        ),
    )
