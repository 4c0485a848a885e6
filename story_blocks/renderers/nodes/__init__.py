"""Structured node rendering."""

from .components import HEADING_SIZES, RenderContext
from .node import NodeKind, RenderedNode
from .renderer import NodeRenderer, render, render_document

__all__ = [
    "HEADING_SIZES",
    "NodeKind",
    "NodeRenderer",
    "RenderContext",
    "RenderedNode",
    "render",
    "render_document",
]
