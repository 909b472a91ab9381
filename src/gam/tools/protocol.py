"""Interfaces for the external tools a scaffold run drives."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from result import Result

from .models import ToolError


class ModuleInitializer(Protocol):
    def init_module(self, project_dir: Path, module_name: str) -> Result[None, ToolError]:
        """Create the module manifest for ``module_name`` inside ``project_dir``."""
        ...


class DependencyFetcher(Protocol):
    def fetch(self, project_dir: Path, module: str) -> Result[None, ToolError]:
        """Add the latest release of ``module`` to the project in ``project_dir``."""
        ...


class RuntimeVersionProbe(Protocol):
    def runtime_version(self) -> Result[str, ToolError]:
        """Return the installed toolchain version, e.g. ``1.22.1``."""
        ...
