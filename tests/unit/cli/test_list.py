from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from gam.cli.main import app

runner = CliRunner()


def test_list_without_projects(tmp_path: Path) -> None:
    result = runner.invoke(app, ["list"], env={"GAM_HOME": str(tmp_path)})

    assert result.exit_code == 0
    assert "No projects recorded." in result.output


def test_list_shows_recorded_projects(tmp_path: Path) -> None:
    log_file = tmp_path / "storage" / "app.txt"
    log_file.parent.mkdir(parents=True)
    log_file.write_text("name: alpha\napp path: /work/alpha\n\nname: beta\napp path: /work/beta\n\n")

    result = runner.invoke(app, ["list"], env={"GAM_HOME": str(tmp_path)})

    assert result.exit_code == 0
    assert "alpha" in result.output
    assert "/work/beta" in result.output


def test_root_without_command_prints_help() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "init" in result.output
    assert "list" in result.output
