"""Unordered list block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..inline import InlineSpan
from .base import Block, BlockType


class UnorderedListBlock(Block):
    """A maximal run of ``-``/``*`` item lines; one span tuple per item."""

    type: Literal[BlockType.UNORDERED_LIST] = BlockType.UNORDERED_LIST
    items: tuple[tuple[InlineSpan, ...], ...] = Field(default_factory=tuple)


__all__ = ["UnorderedListBlock"]
