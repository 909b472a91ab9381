"""CLI command listing projects recorded in the project log."""

from __future__ import annotations

import typer
from result import Err, Ok

from gam.registry import FileProjectLog
from gam.settings import get_settings


def list_projects() -> None:
    """List projects created with gam.

    Examples:

        gam list
    """
    settings = get_settings()
    project_log = FileProjectLog(settings.project_log_path)

    match project_log.records():
        case Ok(records):
            if not records:
                typer.echo("No projects recorded.")
                return

            for record in records:
                typer.secho(f"• {record.name}", fg=typer.colors.CYAN, bold=True)
                typer.echo(f"  {record.path}")
        case Err(error):
            typer.secho(f"{error.message} ({error.path})", err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)
