"""Tests for YAML configuration."""

from pathlib import Path

import pytest
import yaml

from choresplit.config import Config, get_config


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory and working directory into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home


def test_set_and_get(home: Path) -> None:
    """Test values are saved to the local config file."""
    config = get_config()
    config.set("seed", "false")

    assert config.get("seed") == "false"
    assert config.config_file == Path.cwd() / ".choresplit" / "config.yaml"
    with open(config.config_file) as f:
        assert yaml.safe_load(f) == {"seed": "false"}


def test_no_directory_until_saved(home: Path) -> None:
    """Test reading config does not create files."""
    config = get_config()
    assert config.get("seed") is None
    assert not config.config_dir.exists()


def test_global_fallback(home: Path) -> None:
    """Test local config falls back to global values."""
    get_config(use_global=True).set("seed", "false")
    get_config().set("other", "1")

    config = get_config()
    assert config.get("seed") == "false"
    assert config.list() == {"seed": "false", "other": "1"}


def test_local_overrides_global(home: Path) -> None:
    """Test local values take precedence over global ones."""
    get_config(use_global=True).set("seed", "false")
    get_config().set("seed", "true")

    assert get_config().get("seed") == "true"
    assert get_config(use_global=True).list() == {"seed": "false"}


def test_unset(home: Path) -> None:
    """Test removing a value."""
    config = get_config()
    config.set("seed", "false")
    config.unset("seed")
    config.unset("missing")

    assert get_config().get("seed", "default") == "default"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), (False, False), ("yes", True), ("False", False), ("0", False), ("on", True)],
)
def test_get_bool(home: Path, value: object, expected: bool) -> None:
    """Test boolean values written by YAML or the CLI."""
    config = get_config()
    config.set("seed", value)
    assert config.get_bool("seed") is expected


def test_get_bool_default_and_invalid(home: Path) -> None:
    """Test boolean defaults and unreadable values."""
    config = get_config()
    assert config.get_bool("seed", default=True) is True

    config.set("seed", "maybe")
    with pytest.raises(ValueError):
        config.get_bool("seed")


def test_invalid_yaml(tmp_path: Path, home: Path) -> None:
    """Test a broken config file is reported."""
    config_dir = tmp_path / "broken"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("seed: [unclosed\n")

    with pytest.raises(ValueError, match="Failed to load config"):
        Config(config_dir=config_dir)
