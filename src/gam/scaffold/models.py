"""Scaffold request, summary and error models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from gam.flavors import Flavor

from .folders import FolderLayout


class ProjectRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="new_app", min_length=1)
    working_dir: Path
    dockerfile: bool = False
    layout: FolderLayout = FolderLayout.FLAT


class ProjectSummary(BaseModel):
    name: str
    root: Path
    flavor: Flavor
    folders: list[Path] = Field(default_factory=list)
    entrypoint: Path | None = None
    dockerfile: Path | None = None
    warnings: list[str] = Field(default_factory=list)


class AssemblyError(BaseModel):
    """Base error for a scaffold run that had to stop."""

    model_config = ConfigDict(extra="forbid")

    message: str


class RootDirectoryError(AssemblyError):
    """Project root could not be created."""

    path: Path


class ModuleInitError(AssemblyError):
    """Module manifest initialization failed."""

    module: str


class ProjectRecordError(AssemblyError):
    """The created project could not be recorded in the project log."""

    path: Path
