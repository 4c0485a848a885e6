"""Paragraph block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..inline import InlineSpan
from .base import Block, BlockType


class ParagraphBlock(Block):
    type: Literal[BlockType.PARAGRAPH] = BlockType.PARAGRAPH
    spans: tuple[InlineSpan, ...] = Field(default_factory=tuple)


__all__ = ["ParagraphBlock"]
