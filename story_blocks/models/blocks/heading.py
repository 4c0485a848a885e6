"""Heading block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..inline import InlineSpan
from .base import Block, BlockType

MAX_HEADING_LEVEL = 4


class HeadingBlock(Block):
    type: Literal[BlockType.HEADING] = BlockType.HEADING
    level: int = Field(default=2, ge=1, le=MAX_HEADING_LEVEL)
    spans: tuple[InlineSpan, ...] = Field(default_factory=tuple)


__all__ = ["HeadingBlock", "MAX_HEADING_LEVEL"]
