# tests/conftest.py
import pytest

from ariohash.config.loader import ENV_OVERRIDES, reset_config_cache

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Points config and log paths at a temp dir and clears cached settings."""
    home = tmp_path / "ariohash_home"
    monkeypatch.setenv("ARIOHASH_HOME", str(home))
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    reset_config_cache()
    yield home
    reset_config_cache()
