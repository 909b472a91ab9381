"""Project log models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

NAME_PREFIX = "name: "
PATH_PREFIX = "app path: "


class ProjectRecord(BaseModel):
    """One created project, as stored in the shared project log."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path

    def to_text(self) -> str:
        return f"{NAME_PREFIX}{self.name}\n{PATH_PREFIX}{self.path}\n\n"


class ProjectLogError(BaseModel):
    """Error reading or writing the project log."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str
