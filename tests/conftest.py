import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings loader at a file that does not exist."""
    path = tmp_path / "no-settings.toml"
    monkeypatch.setenv("INI_GEN_SETTINGS", str(path))
    return path
