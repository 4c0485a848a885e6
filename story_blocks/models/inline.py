"""Inline span models produced by the tokenizer."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SpanType(str, Enum):
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"


class Span(BaseModel):
    """Immutable styled run of text inside a block."""

    model_config = ConfigDict(frozen=True)


class TextSpan(Span):
    type: Literal[SpanType.TEXT] = SpanType.TEXT
    text: str


class BoldSpan(Span):
    type: Literal[SpanType.BOLD] = SpanType.BOLD
    children: tuple[InlineSpan, ...] = Field(default_factory=tuple)


class ItalicSpan(Span):
    type: Literal[SpanType.ITALIC] = SpanType.ITALIC
    children: tuple[InlineSpan, ...] = Field(default_factory=tuple)


class CodeSpan(Span):
    type: Literal[SpanType.CODE] = SpanType.CODE
    text: str


class LinkSpan(Span):
    """Anchor span; ``text`` is kept literal and never re-tokenized."""

    type: Literal[SpanType.LINK] = SpanType.LINK
    text: str
    url: str


InlineSpan = Annotated[
    Union[TextSpan, BoldSpan, ItalicSpan, CodeSpan, LinkSpan],
    Field(discriminator="type"),
]

BoldSpan.model_rebuild()
ItalicSpan.model_rebuild()


def plain_text(spans: Iterable[Span]) -> str:
    """Flatten a span tree into its visible text."""
    parts: list[str] = []
    for span in spans:
        if isinstance(span, (BoldSpan, ItalicSpan)):
            parts.append(plain_text(span.children))
        else:
            parts.append(span.text)
    return "".join(parts)


__all__ = [
    "BoldSpan",
    "CodeSpan",
    "InlineSpan",
    "ItalicSpan",
    "LinkSpan",
    "Span",
    "SpanType",
    "TextSpan",
    "plain_text",
]
