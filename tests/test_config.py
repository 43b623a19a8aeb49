"""Tests for configuration."""

from pathlib import Path

import pytest

from taskmaster.config import DEFAULTS, Config


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the working directory at separate temporary directories."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home


def test_defaults(home: Path) -> None:
    """Test defaults apply when nothing is set."""
    config = Config()
    assert config.get("data_file") == DEFAULTS["data_file"]
    assert config.get("missing") is None
    assert config.list() == {}
    assert config.data_file() == Path.cwd() / ".taskmaster" / "data.yaml"


def test_set_get_unset(home: Path) -> None:
    """Test local values are written and read back."""
    config = Config()
    config.set("data_file", "team.yaml")

    reloaded = Config()
    assert reloaded.get("data_file") == "team.yaml"
    assert (Path.cwd() / ".taskmaster" / "config.yaml").exists()

    reloaded.unset("data_file")
    assert Config().get("data_file") == DEFAULTS["data_file"]


def test_local_overrides_global(home: Path) -> None:
    """Test lookup order local, then global, then defaults."""
    Config(use_global=True).set("data_file", "/srv/global.yaml")
    assert Config().get("data_file") == "/srv/global.yaml"
    assert Config().data_file() == Path("/srv/global.yaml")

    Config().set("data_file", "local.yaml")
    assert Config().get("data_file") == "local.yaml"
    assert Config(use_global=True).get("data_file") == "/srv/global.yaml"
    assert Config().list() == {"data_file": "local.yaml"}


def test_custom_config_dir(tmp_path: Path, home: Path) -> None:
    """Test an explicit config directory."""
    config = Config(config_dir=tmp_path / "custom")
    config.set("data_file", "x.yaml")
    assert (tmp_path / "custom" / "config.yaml").exists()


def test_invalid_yaml_raises(home: Path) -> None:
    """Test unreadable local config is reported."""
    config_dir = Path.cwd() / ".taskmaster"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError):
        Config()


def test_source_names_the_winning_scope(home: Path) -> None:
    """Test source reports local, global or default."""
    assert Config().source("data_file") == "default"
    Config(use_global=True).set("data_file", "g.yaml")
    assert Config().source("data_file") == "global"
    Config().set("data_file", "l.yaml")
    assert Config().source("data_file") == "local"
    assert Config(use_global=True).source("data_file") == "global"
