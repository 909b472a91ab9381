from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gam.cli.main import app
from gam.flavors import BuiltinFlavor
from gam.settings import PACKAGED_CONFIGS_DIR
from gam.templates import render_dockerfile, render_entrypoint

runner = CliRunner()


@pytest.fixture
def commands(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    calls: list[list[str]] = []

    def fake_run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        calls.append(command)
        stdout = "go version go1.22.1 linux/amd64\n" if command[1:] == ["version"] else ""
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    monkeypatch.setattr("gam.tools.go.subprocess.run", fake_run)
    return calls


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "gam-home"
    shutil.copytree(PACKAGED_CONFIGS_DIR, path / "configs")
    return path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


def _invoke(args: list[str], home: Path, workspace: Path, answers: str = "1\n"):
    return runner.invoke(
        app,
        ["init", *args, "--working-dir", str(workspace)],
        input=answers,
        env={"GAM_HOME": str(home), "NO_COLOR": "1"},
    )


def test_init_with_dockerfile(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke(["--name", "demo", "-d"], home, workspace)

    assert result.exit_code == 0, result.output
    root = workspace.resolve() / "demo"
    assert (root / "main.go").read_text() == render_entrypoint(BuiltinFlavor.GIN)
    assert (root / "Dockerfile").read_text() == render_dockerfile("1.22.1")
    assert (root / "cmd").is_dir()
    assert (root / "handlers").is_dir()
    assert "demo created successfully (gin)" in result.output
    assert commands == [
        ["go", "mod", "init", "demo"],
        ["go", "get", "-u", "github.com/gin-gonic/gin@latest"],
        ["go", "version"],
    ]
    assert (home / "storage" / "app.txt").read_text() == f"name: demo\napp path: {root}\n\n"


def test_init_without_dockerfile(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke(["--name", "demo"], home, workspace, answers="basic http\n")

    assert result.exit_code == 0, result.output
    assert (workspace / "demo" / "main.go").read_text() == render_entrypoint(BuiltinFlavor.HTTP)
    assert not (workspace / "demo" / "Dockerfile").exists()
    assert commands == [["go", "mod", "init", "demo"]]


def test_init_defaults_to_new_app(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke([], home, workspace, answers="2\n")

    assert result.exit_code == 0, result.output
    assert (workspace / "new_app" / "main.go").exists()
    assert commands[0] == ["go", "mod", "init", "new_app"]


def test_init_nested_layout(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke(["--name", "demo", "--nested"], home, workspace)

    assert result.exit_code == 0, result.output
    assert (workspace / "demo" / "internal" / "handlers").is_dir()


def test_init_twice_fails_at_root_creation(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    assert _invoke(["--name", "demo"], home, workspace).exit_code == 0

    result = _invoke(["--name", "demo"], home, workspace)

    assert result.exit_code == 1
    assert "Error creating the directory" in result.output
    assert (home / "storage" / "app.txt").read_text().count("name: demo\n") == 1


def test_init_custom_flavor_reports_warnings(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke(["--name", "demo"], home, workspace, answers="echo\n4\n")

    assert result.exit_code == 0, result.output
    assert "4) echo" in result.output
    assert "No main.go template for flavor 'echo'" in result.output
    assert (workspace / "demo" / "main.go").read_text() == ""


def test_init_interrupted_prompt_exits_with_error(home: Path, workspace: Path, commands: list[list[str]]) -> None:
    result = _invoke(["--name", "demo"], home, workspace, answers="")

    assert result.exit_code == 1
    assert "Prompt failed" in result.output
    assert not (home / "storage" / "app.txt").exists()


def test_init_fails_when_go_is_missing(
    home: Path, workspace: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def missing_go(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        raise FileNotFoundError(command[0])

    monkeypatch.setattr("gam.tools.go.subprocess.run", missing_go)

    result = _invoke(["--name", "demo"], home, workspace)

    assert result.exit_code == 1
    assert "Failed to run go mod init" in result.output


@pytest.mark.parametrize("blank_name", ["", "   "])
def test_init_blank_name_falls_back_to_new_app(
    home: Path, workspace: Path, commands: list[list[str]], blank_name: str
) -> None:
    result = _invoke(["--name", blank_name], home, workspace)

    assert result.exit_code == 0, result.output
    assert (workspace / "new_app" / "main.go").exists()
    assert commands[0] == ["go", "mod", "init", "new_app"]
    assert "name: new_app\n" in (home / "storage" / "app.txt").read_text()
