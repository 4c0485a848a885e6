"""Serialize rendered nodes into an HTML fragment for browser previews."""

from __future__ import annotations

from html import escape
from typing import Iterable

from story_blocks.renderers.nodes import NodeKind, RenderedNode

_CONTAINER_TAGS: dict[NodeKind, str] = {
    NodeKind.PARAGRAPH: "p",
    NodeKind.LIST: "ul",
    NodeKind.LIST_ITEM: "li",
    NodeKind.STRONG: "strong",
    NodeKind.EMPHASIS: "em",
}


def to_html(nodes: Iterable[RenderedNode]) -> str:
    """Return the HTML for ``nodes``, one top-level element per line."""
    return "\n".join(_node_html(node) for node in nodes)


def _node_html(node: RenderedNode) -> str:
    kind = node.kind
    if kind is NodeKind.TEXT:
        return escape(node.text or "")
    if kind is NodeKind.CODE:
        return f"<code>{escape(node.text or '')}</code>"
    if kind is NodeKind.LINK:
        return (
            f'<a{_attrs(node.attrs, ("href", "target", "rel"))}>'
            f"{escape(node.text or '')}</a>"
        )
    if kind is NodeKind.IMAGE:
        return f"<img{_attrs(node.attrs, ('src', 'alt'))}>"
    if kind is NodeKind.RULE:
        return "<hr>"
    if kind is NodeKind.PLACEHOLDER:
        return f'<p class="story-empty">{escape(node.text or "")}</p>'
    if kind is NodeKind.HEADING:
        tag = f"h{node.attrs.get('level', '2')}"
        return f"<{tag}>{_children_html(node)}</{tag}>"

    tag = _CONTAINER_TAGS[kind]
    return f"<{tag}>{_children_html(node)}</{tag}>"


def _children_html(node: RenderedNode) -> str:
    return "".join(_node_html(child) for child in node.children)


def _attrs(attrs: dict[str, str], names: tuple[str, ...]) -> str:
    return "".join(
        f' {name}="{escape(attrs[name], quote=True)}"' for name in names if attrs.get(name)
    )


__all__ = ["to_html"]
