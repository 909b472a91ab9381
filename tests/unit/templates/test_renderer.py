from __future__ import annotations

import pytest

from gam.flavors import BuiltinFlavor, CustomFlavor
from gam.templates import render_dockerfile, render_entrypoint


@pytest.mark.parametrize("flavor", list(BuiltinFlavor))
def test_builtin_flavors_render_deterministic_go_sources(flavor: BuiltinFlavor) -> None:
    first = render_entrypoint(flavor)
    second = render_entrypoint(flavor)

    assert first == second
    assert first.startswith("package main\n")
    assert "func main()" in first


@pytest.mark.parametrize(
    ("flavor", "expected_import"),
    [
        (BuiltinFlavor.GIN, '"github.com/gin-gonic/gin"'),
        (BuiltinFlavor.GRPC, '"google.golang.org/grpc"'),
        (BuiltinFlavor.HTTP, '"net/http"'),
    ],
)
def test_builtin_flavors_import_their_framework(flavor: BuiltinFlavor, expected_import: str) -> None:
    assert expected_import in render_entrypoint(flavor)


def test_flavors_render_distinct_sources() -> None:
    assert len({render_entrypoint(flavor) for flavor in BuiltinFlavor}) == len(BuiltinFlavor)


def test_custom_flavor_renders_empty_text() -> None:
    assert render_entrypoint(CustomFlavor(raw="fiber")) == ""


def test_dockerfile_uses_go_version_in_builder_image() -> None:
    content = render_dockerfile("1.22.1")

    assert content.startswith("FROM golang:1.22.1 AS builder\n")
    assert "{go_version}" not in content
    assert render_dockerfile("1.22.1") == content
