import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point config and data directories at a temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("QUOTE_IT_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("QUOTE_IT_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture()
def store_path(isolated_home):
    return isolated_home / "data" / "quotes.json"
