"""Shared fixtures for the pakr_iec tests."""

import pytest

from pakr_iec.config.config import get_config
from pakr_iec.config.create_config import ConfigSingleton
from pakr_iec.meta.singleton import Singleton

CONFIG_ENV_VARS = ["ENV", "SERVICE_NAME", "LOG_LEVEL", "LOG_FILE", "DEFAULT_MODE", "ENV_FILES"]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    """Run every test in an empty directory with no config env and no cached config."""
    monkeypatch.chdir(tmp_path)
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    Singleton.clear(ConfigSingleton)
    get_config.cache_clear()
    yield
    Singleton.clear(ConfigSingleton)
    get_config.cache_clear()
