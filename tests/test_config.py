"""Tests for configuration loading."""

import tomllib
from pathlib import Path

import pytest

from textprobe.checks import CHECKS
from textprobe.config import ProbeConfig, load_config


class TestLoadConfig:
    def test_load_config_file(self, config_file):
        config = load_config(config_file)
        assert config.checks == ["ipv4", "email"]
        assert config.ipv4.strict is True
        assert config.report.show_unmatched is False

    def test_empty_config_uses_defaults(self, tmp_path: Path):
        config_file = tmp_path / "textprobe.toml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.checks == list(CHECKS)
        assert config.ipv4.strict is False
        assert config.report.show_unmatched is True

    def test_partial_config(self, tmp_path: Path):
        config_file = tmp_path / "textprobe.toml"
        config_file.write_text('[checks]\nenabled = [" url "]\n')
        config = load_config(config_file)
        assert config.checks == ["url"]
        assert config.ipv4.strict is False

    def test_accepts_str_path(self, config_file):
        assert load_config(str(config_file)).checks == ["ipv4", "email"]

    def test_malformed_toml_raises(self, tmp_path: Path):
        config_file = tmp_path / "textprobe.toml"
        config_file.write_text("[checks\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(config_file)

    def test_section_must_be_table(self, tmp_path: Path):
        config_file = tmp_path / "textprobe.toml"
        config_file.write_text('checks = ["ipv4"]\n')
        with pytest.raises(ValueError, match=r"\[checks\]"):
            load_config(config_file)

    def test_enabled_must_be_list(self, tmp_path: Path):
        config_file = tmp_path / "textprobe.toml"
        config_file.write_text('[checks]\nenabled = "ipv4"\n')
        with pytest.raises(ValueError, match="enabled"):
            load_config(config_file)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_default_path_is_cwd(self, tmp_path: Path, monkeypatch):
        (tmp_path / "textprobe.toml").write_text('[ipv4]\nstrict = true\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().ipv4.strict is True


class TestProbeConfigDefaults:
    def test_defaults(self):
        config = ProbeConfig()
        assert config.checks == list(CHECKS)
        assert config.ipv4.strict is False
        assert config.report.show_unmatched is True
