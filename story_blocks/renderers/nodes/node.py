"""Structured presentation tree emitted by the node renderer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    IMAGE = "image"
    RULE = "rule"
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    CODE = "code"
    LINK = "link"
    PLACEHOLDER = "placeholder"


class RenderedNode(BaseModel):
    """One presentation element; leaves carry ``text``, containers ``children``."""

    kind: NodeKind
    text: str | None = None
    attrs: dict[str, str] = Field(default_factory=dict)
    children: tuple[RenderedNode, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


RenderedNode.model_rebuild()

__all__ = ["NodeKind", "RenderedNode"]
