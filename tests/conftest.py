"""
Shared fixtures: isolate configuration from the developer's machine.
"""
import pytest

from core.config import AppSettings, get_user_env_file


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config dir and cwd at a temp dir and clear RESTDOC_* vars."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("RESTDOC_"):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(
        AppSettings.model_config, "env_file", (".env", str(get_user_env_file()))
    )
    return tmp_path
