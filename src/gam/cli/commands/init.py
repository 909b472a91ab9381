"""CLI command creating a new Go service."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from gam.common import resolve_working_directory
from gam.flavors import FlavorSelector, flavor_label
from gam.registry import FileProjectLog
from gam.scaffold import AssemblyError, FolderLayout, ProjectAssembler, ProjectRequest
from gam.settings import get_settings
from gam.tools import GoToolchain

NameOption = Annotated[
    str,
    typer.Option("--name", help="Generate an app with the given name."),
]
DockerfileOption = Annotated[
    bool,
    typer.Option("--dockerfile", "-d", help="Generate a Dockerfile in the new app directory."),
]
NestedOption = Annotated[
    bool,
    typer.Option("--nested", help="Create subfolders inside their parent folder instead of at the project root."),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override the directory the new app is created in.",
    ),
]


def init(
    name: NameOption = "new_app",
    dockerfile: DockerfileOption = False,
    nested: NestedOption = False,
    working_dir: WorkingDirOption = None,
) -> None:
    """Initialize a Go application based on gin, gRPC or basic http.

    Examples:

        gam init

        gam init --name my_service -d
    """
    name = name.strip() or "new_app"
    settings = get_settings()
    toolchain = GoToolchain(settings.go_binary)
    selector = FlavorSelector()

    assembler = ProjectAssembler(
        configs_dir=settings.configs_dir,
        project_log=FileProjectLog(settings.project_log_path),
        module_initializer=toolchain,
        dependency_fetcher=toolchain,
        version_probe=toolchain,
        choose_flavor=selector.select,
        entrypoint_filename=settings.paths.entrypoint_filename,
        dockerfile_filename=settings.paths.dockerfile_filename,
    )
    request = ProjectRequest(
        name=name,
        working_dir=resolve_working_directory(working_dir),
        dockerfile=dockerfile,
        layout=FolderLayout.NESTED if nested else FolderLayout.FLAT,
    )

    try:
        result = assembler.assemble(request)
    except (typer.Abort, EOFError):
        typer.secho("Prompt failed: input interrupted", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from None

    match result:
        case Ok(summary):
            for warning in summary.warnings:
                typer.secho(warning, err=True, fg=typer.colors.YELLOW)
            typer.secho(
                f"✓ {summary.name} created successfully ({flavor_label(summary.flavor)})",
                fg=typer.colors.GREEN,
            )
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _handle_error(error: AssemblyError) -> None:
    message = error.message
    error_path = getattr(error, "path", None)
    if error_path is not None and str(error_path) not in message:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
