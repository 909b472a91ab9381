"""Pydantic models for project layout configuration and its errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FolderSpec(BaseModel):
    """One directory to create, with the directories nested under it."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    subfolders: list[FolderSpec] = Field(default_factory=list)

    @field_validator("subfolders", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class ProjectConfig(BaseModel):
    """Folder layout for one flavor (configs/config-<flavor>.yaml)."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    service_name: str
    folders: list[FolderSpec] = Field(default_factory=list)

    @field_validator("folders", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


def count_folders(folders: list[FolderSpec]) -> int:
    """Total number of folder nodes, nested ones included."""
    return sum(1 + count_folders(folder.subfolders) for folder in folders)


class ConfigNotFoundError(BaseModel):
    """No configuration document matches the flavor."""

    model_config = ConfigDict(extra="forbid")

    flavor: str
    expected_path: Path | None = None
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    flavor: str
    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Configuration fields do not map onto ProjectConfig."""

    model_config = ConfigDict(extra="forbid")

    flavor: str
    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    flavor: str
    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError
