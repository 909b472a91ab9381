"""Append-only, file-based project log."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from gam.common import create_logger

from .models import NAME_PREFIX, PATH_PREFIX, ProjectLogError, ProjectRecord

logger = create_logger("registry")


class FileProjectLog:
    """Records created projects as two-line entries in a text file.

    Entries are only ever appended; nothing here rewrites or truncates the file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def append(self, record: ProjectRecord) -> Result[None, ProjectLogError]:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(record.to_text())
        except OSError as e:
            logger.error("Project log write failed", path=str(self.path), error=str(e))
            return Err(ProjectLogError(path=self.path, message=f"Failed to append to project log: {e}"))

        logger.debug("Project recorded", name=record.name, path=str(record.path))
        return Ok(None)

    def records(self) -> Result[list[ProjectRecord], ProjectLogError]:
        if not self.path.exists():
            return Ok([])

        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            return Err(ProjectLogError(path=self.path, message=f"Failed to read project log: {e}"))

        records: list[ProjectRecord] = []
        name: str | None = None
        for line in lines:
            if line.startswith(NAME_PREFIX):
                name = line.removeprefix(NAME_PREFIX)
            elif line.startswith(PATH_PREFIX) and name is not None:
                records.append(ProjectRecord(name=name, path=Path(line.removeprefix(PATH_PREFIX))))
                name = None
        return Ok(records)
