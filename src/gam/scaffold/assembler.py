"""End-to-end project scaffolding."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from result import Err, Ok, Result, is_err

from gam.common import create_logger
from gam.config import load_project_config
from gam.flavors import BuiltinFlavor, CustomFlavor, Flavor, flavor_label
from gam.registry import FileProjectLog, ProjectRecord
from gam.templates import render_dockerfile, render_entrypoint
from gam.tools import DependencyFetcher, ModuleInitializer, RuntimeVersionProbe

from .folders import build_folders
from .models import (
    AssemblyError,
    ModuleInitError,
    ProjectRecordError,
    ProjectRequest,
    ProjectSummary,
    RootDirectoryError,
)

logger = create_logger("scaffold")

type FlavorChooser = Callable[[], Flavor]


def dependency_module(flavor: Flavor) -> str | None:
    """Go module fetched into a new project of the given flavor."""
    match flavor:
        case BuiltinFlavor.GIN:
            return "github.com/gin-gonic/gin"
        case BuiltinFlavor.GRPC:
            return "google.golang.org/grpc"
        case BuiltinFlavor.HTTP | CustomFlavor():
            return None


class ProjectAssembler:
    """Create a new service directory and record it in the project log.

    Every step works on explicit paths derived from the request, so the
    process working directory is never touched. Steps that fail fatally return
    an ``AssemblyError`` and leave whatever was already created in place.
    """

    def __init__(
        self,
        *,
        configs_dir: Path,
        project_log: FileProjectLog,
        module_initializer: ModuleInitializer,
        dependency_fetcher: DependencyFetcher,
        version_probe: RuntimeVersionProbe,
        choose_flavor: FlavorChooser,
        entrypoint_filename: str = "main.go",
        dockerfile_filename: str = "Dockerfile",
    ) -> None:
        self.configs_dir = configs_dir
        self.project_log = project_log
        self.module_initializer = module_initializer
        self.dependency_fetcher = dependency_fetcher
        self.version_probe = version_probe
        self.choose_flavor = choose_flavor
        self.entrypoint_filename = entrypoint_filename
        self.dockerfile_filename = dockerfile_filename

    def assemble(self, request: ProjectRequest) -> Result[ProjectSummary, AssemblyError]:
        root = (request.working_dir / request.name).absolute()
        logger.info("Creating project", name=request.name, root=str(root))

        try:
            root.mkdir()
        except OSError as e:
            logger.error("Project root creation failed", root=str(root), error=str(e))
            return Err(RootDirectoryError(path=root, message=f"Error creating the directory {root}: {e}"))

        init_result = self.module_initializer.init_module(root, request.name)
        if is_err(init_result):
            error = init_result.err_value
            logger.error("Module init failed", module=request.name, error=error.message)
            return Err(ModuleInitError(module=request.name, message=f"Failed to run go mod init: {error.message}"))
        logger.info("Go application initialized", module=request.name)

        flavor = self.choose_flavor()
        summary = ProjectSummary(name=request.name, root=root, flavor=flavor)

        match load_project_config(flavor, self.configs_dir):
            case Ok(config):
                folders = config.folders
            case Err(config_error):
                summary.warnings.append(f"Configuration not loaded: {config_error.message}")
                folders = []

        summary.folders = build_folders(root, folders, request.layout)
        logger.info("Application structure created", folders=len(summary.folders))

        self._fetch_dependency(root, flavor, summary)
        self._write_entrypoint(root, flavor, summary)
        if request.dockerfile:
            self._write_dockerfile(root, summary)

        record_result = self.project_log.append(ProjectRecord(name=request.name, path=root))
        if is_err(record_result):
            return Err(ProjectRecordError(path=record_result.err_value.path, message=record_result.err_value.message))

        logger.info("Project created", name=request.name, flavor=flavor_label(flavor))
        return Ok(summary)

    def _fetch_dependency(self, root: Path, flavor: Flavor, summary: ProjectSummary) -> None:
        module = dependency_module(flavor)
        if module is None:
            return

        fetch_result = self.dependency_fetcher.fetch(root, module)
        if is_err(fetch_result):
            message = fetch_result.err_value.message
            logger.warning("Dependency fetch failed", module=module, error=message)
            summary.warnings.append(f"Could not fetch {module}: {message}")
        else:
            logger.info("Dependency fetched", module=module)

    def _write_entrypoint(self, root: Path, flavor: Flavor, summary: ProjectSummary) -> None:
        content = render_entrypoint(flavor)
        if isinstance(flavor, CustomFlavor):
            logger.warning("No template for flavor", flavor=flavor.raw)
            summary.warnings.append(f"No {self.entrypoint_filename} template for flavor '{flavor.raw}'.")

        path = root / self.entrypoint_filename
        if _append_text(path, content, summary):
            summary.entrypoint = path
            logger.info("Entry point generated", path=str(path))

    def _write_dockerfile(self, root: Path, summary: ProjectSummary) -> None:
        version_result = self.version_probe.runtime_version()
        if is_err(version_result):
            message = version_result.err_value.message
            logger.warning("Go version query failed", error=message)
            summary.warnings.append(f"Dockerfile skipped: {message}")
            return

        path = root / self.dockerfile_filename
        if _append_text(path, render_dockerfile(version_result.ok_value), summary):
            summary.dockerfile = path
            logger.info("Dockerfile generated", path=str(path))


def _append_text(path: Path, content: str, summary: ProjectSummary) -> bool:
    try:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as e:
        logger.warning("File write failed", path=str(path), error=str(e))
        summary.warnings.append(f"Could not write {path.name}: {e}")
        return False
    return True
