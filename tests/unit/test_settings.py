from __future__ import annotations

from pathlib import Path

import pytest

from gam.settings import PACKAGED_CONFIGS_DIR, Settings, get_settings, reload_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("GAM_HOME", "GAM_GO_BINARY", "GAM_LOGGING__LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_use_packaged_configs_and_xdg_storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))

    settings = Settings()

    assert settings.configs_dir == PACKAGED_CONFIGS_DIR
    assert settings.project_log_path == tmp_path / "xdg-data" / "gam" / "storage" / "app.txt"
    assert settings.go_binary == "go"


def test_home_overrides_configs_and_storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAM_HOME", str(tmp_path / "install"))

    settings = Settings()

    assert settings.configs_dir == tmp_path / "install" / "configs"
    assert settings.project_log_path == tmp_path / "install" / "storage" / "app.txt"


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAM_GO_BINARY", "go1.22")
    monkeypatch.setenv("GAM_LOGGING__LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.go_binary == "go1.22"
    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.enabled is True


def test_reload_settings_replaces_cached_instance(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = reload_settings()
    monkeypatch.setenv("GAM_HOME", str(tmp_path))

    second = reload_settings()

    assert second is not first
    assert get_settings() is second
    assert second.home == tmp_path
