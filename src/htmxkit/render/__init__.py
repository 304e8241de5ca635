"""Serialize node trees to HTML strings."""

from htmxkit.render.renderer import DOCTYPE, render, render_document

__all__ = ["DOCTYPE", "render", "render_document"]
