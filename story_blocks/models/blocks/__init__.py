"""Typed block exports and helpers."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field

from .base import Block, BlockType
from .heading import MAX_HEADING_LEVEL, HeadingBlock
from .image import DEFAULT_IMAGE_ALT, ImageBlock
from .list_block import UnorderedListBlock
from .paragraph import ParagraphBlock
from .rule import RuleBlock

AnyBlock = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        UnorderedListBlock,
        ImageBlock,
        RuleBlock,
    ],
    Field(discriminator="type"),
]


class Document(BaseModel):
    """Root of a parsed story; rebuilt from scratch on every parse."""

    blocks: tuple[AnyBlock, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


__all__ = [
    "AnyBlock",
    "Block",
    "BlockType",
    "DEFAULT_IMAGE_ALT",
    "Document",
    "HeadingBlock",
    "ImageBlock",
    "MAX_HEADING_LEVEL",
    "ParagraphBlock",
    "RuleBlock",
    "UnorderedListBlock",
]
