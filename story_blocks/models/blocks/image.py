"""Image block definition."""

from __future__ import annotations

from typing import Literal

from .base import Block, BlockType

DEFAULT_IMAGE_ALT = "image"


class ImageBlock(Block):
    type: Literal[BlockType.IMAGE] = BlockType.IMAGE
    alt: str = DEFAULT_IMAGE_ALT
    src: str


__all__ = ["DEFAULT_IMAGE_ALT", "ImageBlock"]
