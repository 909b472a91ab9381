"""Materialize configured folder trees on disk."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from gam.common import create_logger
from gam.config import FolderSpec

logger = create_logger("scaffold.folders")


class FolderLayout(str, Enum):
    """Where nested folders end up.

    FLAT creates every folder, at any depth, directly under the base path.
    NESTED creates ``base/parent/child``.
    """

    FLAT = "flat"
    NESTED = "nested"


def build_folders(
    base_path: Path,
    folders: Sequence[FolderSpec],
    layout: FolderLayout = FolderLayout.FLAT,
) -> list[Path]:
    """Create the directories described by ``folders`` under ``base_path``.

    Directories are created depth-first in input order. Existing directories
    are left alone; a directory that cannot be created is logged and skipped.

    Returns:
        Every directory of the tree that exists after the walk, in creation order.
    """
    created: list[Path] = []
    _build(base_path, folders, layout, created)
    return created


def _build(base_path: Path, folders: Sequence[FolderSpec], layout: FolderLayout, created: list[Path]) -> None:
    for folder in folders:
        target = base_path / folder.name
        try:
            target.mkdir(mode=0o755, exist_ok=True)
            if target not in created:
                created.append(target)
        except OSError as e:
            logger.warning("Could not create folder", path=str(target), error=str(e))

        child_base = target if layout is FolderLayout.NESTED else base_path
        _build(child_base, folder.subfolders, layout, created)
