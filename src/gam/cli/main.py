from __future__ import annotations

import os
from typing import Annotated

import typer

from gam.common import create_logger, setup_cli_logging
from gam.settings import reload_settings

from .commands import init as init_commands
from .commands import projects as project_commands

logger = create_logger("cli")

app = typer.Typer(
    help="Scaffold Go backend services.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("init")(init_commands.init)
app.command("list")(project_commands.list_projects)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    reload_settings()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    settings = reload_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the gam CLI."""
    _setup_logging()
    app()
