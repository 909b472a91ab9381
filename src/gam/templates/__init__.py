from .renderer import render_dockerfile, render_entrypoint

__all__ = ["render_dockerfile", "render_entrypoint"]
