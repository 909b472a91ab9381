"""Template rendering for generated project files."""

from __future__ import annotations

from gam.flavors import BuiltinFlavor, CustomFlavor, Flavor

from .sources import DOCKERFILE, GIN_MAIN, GRPC_MAIN, HTTP_MAIN


def render_entrypoint(flavor: Flavor) -> str:
    """Return the main.go body for a flavor.

    Custom flavors have no template and render as an empty string.
    """
    match flavor:
        case BuiltinFlavor.GIN:
            return GIN_MAIN
        case BuiltinFlavor.GRPC:
            return GRPC_MAIN
        case BuiltinFlavor.HTTP:
            return HTTP_MAIN
        case CustomFlavor():
            return ""


def render_dockerfile(go_version: str) -> str:
    return DOCKERFILE.format(go_version=go_version)
