"""Go toolchain commands."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from result import Err, Ok, Result, is_err

from gam.common import create_logger

from .models import ToolCommandError, ToolError, ToolNotInstalledError, ToolOutputError

logger = create_logger("tools.go")

_GO_VERSION_PATTERN = re.compile(r"go version go(\d+\.\d+(?:\.\d+)?)")


def parse_go_version(output: str) -> str | None:
    """Extract ``1.22.1`` from ``go version go1.22.1 linux/amd64``."""
    if match := _GO_VERSION_PATTERN.search(output):
        return match.group(1)
    return None


class GoToolchain:
    """Runs the ``go`` binary for module init, dependency fetch and version queries."""

    def __init__(self, binary: str = "go") -> None:
        self.binary = binary

    def init_module(self, project_dir: Path, module_name: str) -> Result[None, ToolError]:
        return self._run(["mod", "init", module_name], cwd=project_dir).map(lambda _: None)

    def fetch(self, project_dir: Path, module: str) -> Result[None, ToolError]:
        return self._run(["get", "-u", f"{module}@latest"], cwd=project_dir).map(lambda _: None)

    def runtime_version(self) -> Result[str, ToolError]:
        command = [self.binary, "version"]
        run_result = self._run(["version"])
        if is_err(run_result):
            return run_result

        output = run_result.unwrap()
        version = parse_go_version(output)
        if version is None:
            return Err(
                ToolOutputError(
                    command=command,
                    output=output,
                    message=f"Could not parse go version from: {output.strip()}",
                )
            )
        return Ok(version)

    def _run(self, args: list[str], *, cwd: Path | None = None) -> Result[str, ToolError]:
        command = [self.binary, *args]
        logger.debug("Running command", command=" ".join(command), cwd=str(cwd) if cwd else None)

        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            return Err(ToolNotInstalledError(command=command, message=f"{self.binary} command not found"))
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else ""
            return Err(
                ToolCommandError(
                    command=command,
                    returncode=e.returncode,
                    stderr=stderr,
                    message=f"'{' '.join(command)}' failed: {stderr or f'exit status {e.returncode}'}",
                )
            )

        return Ok(completed.stdout)
