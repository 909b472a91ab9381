"""External tool error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ToolError(BaseModel):
    """Base error for external tool invocations."""

    model_config = ConfigDict(extra="forbid")

    command: list[str]
    message: str


class ToolNotInstalledError(ToolError):
    """Tool binary not found."""

    pass


class ToolCommandError(ToolError):
    """Tool exited with a non-zero status."""

    returncode: int
    stderr: str = ""


class ToolOutputError(ToolError):
    """Tool output could not be parsed."""

    output: str
