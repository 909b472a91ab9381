"""External tools invoked while scaffolding a project."""

from .go import GoToolchain, parse_go_version
from .models import ToolCommandError, ToolError, ToolNotInstalledError, ToolOutputError
from .protocol import DependencyFetcher, ModuleInitializer, RuntimeVersionProbe

__all__ = [
    "DependencyFetcher",
    "GoToolchain",
    "ModuleInitializer",
    "RuntimeVersionProbe",
    "ToolCommandError",
    "ToolError",
    "ToolNotInstalledError",
    "ToolOutputError",
    "parse_go_version",
]
