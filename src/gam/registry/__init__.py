"""Shared log of projects created by gam."""

from .file import FileProjectLog
from .models import ProjectLogError, ProjectRecord

__all__ = [
    "FileProjectLog",
    "ProjectLogError",
    "ProjectRecord",
]
