"""CLI entry point for textprobe.

Subcommands:
    ip2int   Convert dotted-decimal IPv4 addresses to integers.
    int2ip   Convert integers to dotted-decimal IPv4 addresses.
    check    Run the string checks against each argument.
    chars    Classify each character of a string.
    info     Show the effective configuration.
"""

from __future__ import annotations

import argparse
import sys


def _load_config(args: argparse.Namespace):
    """Load config, falling back to defaults when no file is present."""
    from textprobe.config import DEFAULT_CONFIG_PATH, ProbeConfig, load_config

    config_path = getattr(args, "config", None)
    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        return ProbeConfig()
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        path = config_path or DEFAULT_CONFIG_PATH
        print(f"Error: invalid config file {path}: {e}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Subcommands: ip2int / int2ip
# ---------------------------------------------------------------------------

def cmd_ip2int(args: argparse.Namespace) -> int:
    """Convert dotted-decimal addresses to integers."""
    config = _load_config(args)

    from textprobe.utils.ip import parse_ipv4

    failed = 0
    for text in args.addresses:
        value = parse_ipv4(text, strict=config.ipv4.strict)
        if value is None:
            print(f"Error: not an IPv4 address: {text!r}", file=sys.stderr)
            failed += 1
            continue
        print(value)
    return 1 if failed else 0


def cmd_int2ip(args: argparse.Namespace) -> int:
    """Convert integers (decimal or 0x hex) to dotted-decimal addresses."""
    from textprobe.utils.ip import format_ipv4

    failed = 0
    for text in args.values:
        try:
            base = 16 if text.lower().startswith("0x") else 10
            value = int(text, base)
        except ValueError:
            print(f"Error: not an integer: {text!r}", file=sys.stderr)
            failed += 1
            continue
        if not 0 <= value <= 0xFFFFFFFF:
            print(f"Warning: {text} is outside 32 bits, using the low 32 bits", file=sys.stderr)
        print(format_ipv4(value))
    return 1 if failed else 0


# ---------------------------------------------------------------------------
# Subcommand: check
# ---------------------------------------------------------------------------

def cmd_check(args: argparse.Namespace) -> int:
    """Run the enabled checks against each argument."""
    config = _load_config(args)

    from textprobe.checks import CHECKS, run_checks

    names = args.only or config.checks
    known = []
    for name in names:
        if name not in CHECKS:
            print(f"Warning: unknown check {name!r}", file=sys.stderr)
            continue
        known.append(name)

    for text in args.texts:
        report = run_checks(text, known, strict_ipv4=config.ipv4.strict)
        print(report.report(show_unmatched=config.report.show_unmatched), end="")
    return 0


# ---------------------------------------------------------------------------
# Subcommand: chars
# ---------------------------------------------------------------------------

def cmd_chars(args: argparse.Namespace) -> int:
    """Print one line per character with its block and flags."""
    from textprobe.checks import classify_characters

    for info in classify_characters(args.text):
        flags = ",".join(name for name, on in info.flags.items() if on) or "-"
        block = info.block or "-"
        print(f"  {info.char!r:>6s} {info.code_point:<8s} {flags:<20s} {block}")
    return 0


# ---------------------------------------------------------------------------
# Subcommand: info
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    """Show the effective configuration."""
    config = _load_config(args)

    print("Checks:")
    for name in config.checks:
        print(f"  {name}")
    print()
    print(f"IPv4 strict:    {config.ipv4.strict}")
    print(f"Show unmatched: {config.report.show_unmatched}")
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="textprobe",
        description="Classify strings: IPv4 addresses, phone numbers, e-mails, CJK text.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to textprobe.toml (default: ./textprobe.toml if present)",
    )

    subparsers = parser.add_subparsers(dest="command")

    ip2int_parser = subparsers.add_parser("ip2int", help="Dotted-decimal IPv4 to integer")
    ip2int_parser.add_argument("addresses", nargs="+")

    int2ip_parser = subparsers.add_parser("int2ip", help="Integer to dotted-decimal IPv4")
    int2ip_parser.add_argument("values", nargs="+")

    check_parser = subparsers.add_parser("check", help="Run string checks")
    check_parser.add_argument("texts", nargs="+")
    check_parser.add_argument(
        "--only", action="append", metavar="NAME",
        help="Run only this check (repeatable; default: checks from config)",
    )

    chars_parser = subparsers.add_parser("chars", help="Classify each character")
    chars_parser.add_argument("text")

    subparsers.add_parser("info", help="Show configuration")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "ip2int": cmd_ip2int,
        "int2ip": cmd_int2ip,
        "check": cmd_check,
        "chars": cmd_chars,
        "info": cmd_info,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
