"""Renderer implementations and helpers."""

from .base import RenderOptions, Renderer, resolve_image_url
from .html import to_html
from .markdown import MarkdownRenderer, render_markdown
from .nodes import NodeKind, NodeRenderer, RenderedNode, render, render_document

__all__ = [
    "MarkdownRenderer",
    "NodeKind",
    "NodeRenderer",
    "RenderOptions",
    "RenderedNode",
    "Renderer",
    "render",
    "render_document",
    "render_markdown",
    "resolve_image_url",
    "to_html",
]
