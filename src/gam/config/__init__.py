"""Public configuration API for gam.

Each built-in flavor has one YAML document describing the folder tree of a
new service. The loader maps a flavor onto its document and validates it.
"""

from __future__ import annotations

from .loader import config_filename, load_project_config
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    FolderSpec,
    ProjectConfig,
    count_folders,
)

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigYamlError",
    "FolderSpec",
    "ProjectConfig",
    "config_filename",
    "count_folders",
    "load_project_config",
]
