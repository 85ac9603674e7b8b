import pytest

from unplugged import config


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Run from an empty directory with the global config reset."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_config", None)
    return tmp_path
