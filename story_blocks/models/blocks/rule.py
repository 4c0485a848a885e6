"""Horizontal rule block definition."""

from __future__ import annotations

from typing import Literal

from .base import Block, BlockType


class RuleBlock(Block):
    type: Literal[BlockType.RULE] = BlockType.RULE


__all__ = ["RuleBlock"]
