import logging
from pathlib import Path

import pytest

from wwt.store import Store


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real config dir and the caller's env."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv("WWT_STORE_PATH", raising=False)
    monkeypatch.delenv("WWT_LOG_LEVEL", raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def store_path(tmp_path) -> Path:
    return tmp_path / "wwt" / "store.json"


@pytest.fixture
def store(store_path) -> Store:
    return Store(store_path)
