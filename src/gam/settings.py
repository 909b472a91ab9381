from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from gam.common import AppInfo, LoggingConfig, get_data_directory

PACKAGED_CONFIGS_DIR = Path(__file__).resolve().parent / "configs"


class AppPaths(BaseModel):
    configs_dir_name: str = "configs"
    storage_dir_name: str = "storage"
    project_log_filename: str = "app.txt"
    entrypoint_filename: str = "main.go"
    dockerfile_filename: str = "Dockerfile"


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()
    home: Path | None = None
    go_binary: str = "go"

    model_config = SettingsConfigDict(
        env_prefix="GAM_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    @property
    def configs_dir(self) -> Path:
        """Directory holding the per-flavor configuration documents.

        Uses ``<home>/configs`` when an installation root is set, otherwise the
        documents shipped with the package.
        """
        if self.home is not None:
            return self.home.expanduser() / self.paths.configs_dir_name
        return PACKAGED_CONFIGS_DIR

    @property
    def storage_dir(self) -> Path:
        if self.home is not None:
            return self.home.expanduser() / self.paths.storage_dir_name
        return get_data_directory(self.app.project_name) / self.paths.storage_dir_name

    @property
    def project_log_path(self) -> Path:
        return self.storage_dir / self.paths.project_log_filename


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Drop the cached settings and read the environment again."""
    global _settings
    _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppInfo",
    "AppPaths",
    "Settings",
    "get_settings",
    "reload_settings",
]
