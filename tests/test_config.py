"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from markdown_anchor.errors import UnsupportedModeError
from markdown_anchor.load_config import DEFAULT_CONFIG, load_config


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    assert load_config(None) == DEFAULT_CONFIG
    assert load_config("does-not-exist.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"platform": "nodejs.org", "module_name": "fs"}))

    loaded = load_config(str(config_file))
    assert loaded["platform"] == "nodejs.org"
    assert loaded["module_name"] == "fs"
    assert loaded["output"] == "link"


def test_load_config_unknown_keys(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify unknown keys are dropped with a warning."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"colour": "blue", "output": "hash"}))

    with caplog.at_level(logging.WARNING, logger="markdown_anchor.load_config"):
        loaded = load_config(config_file)
    assert "colour" not in loaded
    assert loaded["output"] == "hash"
    assert "Ignoring unknown config key: colour" in caplog.text


def test_load_config_invalid(tmp_path: Path) -> None:
    """Verify malformed configuration is rejected."""
    config_file = tmp_path / "config.yml"

    config_file.write_text(yaml.dump(["github.com"]))
    with pytest.raises(ValueError, match="mapping"):
        load_config(config_file)

    config_file.write_text(yaml.dump({"platform": "example.org"}))
    with pytest.raises(UnsupportedModeError):
        load_config(config_file)

    config_file.write_text(yaml.dump({"output": "html"}))
    with pytest.raises(ValueError, match="output format"):
        load_config(config_file)
