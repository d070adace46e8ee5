"""Shared test fixtures for textprobe."""

import textwrap

import pytest


@pytest.fixture
def config_file(tmp_path):
    """Write a textprobe.toml with a reduced check list."""
    path = tmp_path / "textprobe.toml"
    path.write_text(textwrap.dedent("""\
        [checks]
        enabled = ["ipv4", "email"]

        [ipv4]
        strict = true

        [report]
        show_unmatched = false
    """))
    return path
