"""Shared building blocks for typed story blocks."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BlockType(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    UNORDERED_LIST = "unordered_list"
    IMAGE = "image"
    RULE = "rule"


class Block(BaseModel):
    """Immutable representation of a block node."""

    type: BlockType

    model_config = ConfigDict(frozen=True)


__all__ = ["Block", "BlockType"]
