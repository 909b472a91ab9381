"""Project scaffolding: folder trees and the end-to-end assembler."""

from .assembler import ProjectAssembler, dependency_module
from .folders import FolderLayout, build_folders
from .models import (
    AssemblyError,
    ModuleInitError,
    ProjectRecordError,
    ProjectRequest,
    ProjectSummary,
    RootDirectoryError,
)

__all__ = [
    "AssemblyError",
    "FolderLayout",
    "ModuleInitError",
    "ProjectAssembler",
    "ProjectRecordError",
    "ProjectRequest",
    "ProjectSummary",
    "RootDirectoryError",
    "build_folders",
    "dependency_module",
]
