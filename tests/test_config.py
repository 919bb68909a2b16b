"""Tests for configuration and paths."""

from pathlib import Path

import pytest

from quote_it import config
from quote_it.errors import QuoteItError


def test_data_dir_from_quote_it_home(isolated_home):
    assert config.get_data_dir() == isolated_home / "data"
    assert config.get_store_path() == isolated_home / "data" / "quotes.json"


def test_data_dir_from_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("QUOTE_IT_HOME")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))
    assert config.get_data_dir() == tmp_path / "share" / "quote-it"


def test_defaults_when_no_config_file():
    assert config.load_config() == config.get_default_config()


def test_user_config_merges_over_defaults(isolated_home):
    config_dir = isolated_home / "config" / "quote-it"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text('[logging]\nlevel = "DEBUG"\n')

    loaded = config.load_config()
    assert loaded["logging"]["level"] == "DEBUG"
    assert loaded["display"]["date_format"] == "%m-%d-%Y"


def test_store_path_expands_user():
    path = config.get_store_path({"store": {"path": "~/q.json"}})
    assert path == Path.home() / "q.json"


def test_malformed_config_raises(isolated_home):
    config_dir = isolated_home / "config" / "quote-it"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text("not = [valid")

    with pytest.raises(QuoteItError):
        config.load_config()


def test_ensure_dirs(isolated_home):
    config.ensure_dirs()
    assert (isolated_home / "config" / "quote-it").is_dir()
    assert (isolated_home / "data").is_dir()


@pytest.mark.parametrize("content", [
    'logging = "DEBUG"\n',
    'store = "x.json"\n',
    "[store]\npath = 5\n",
    "[display]\ndate_format = 5\n",
    '[logging]\nlevel = ["DEBUG"]\n',
])
def test_wrong_shape_config_raises(isolated_home, content):
    config_dir = isolated_home / "config" / "quote-it"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text(content)

    with pytest.raises(QuoteItError, match="Invalid config"):
        config.load_config()


def test_unknown_sections_are_ignored(isolated_home):
    config_dir = isolated_home / "config" / "quote-it"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text('[extra]\nkey = "value"\n')

    assert config.load_config() == config.get_default_config()
