"""Story document models: blocks and inline spans."""

from .blocks import (
    AnyBlock,
    Block,
    BlockType,
    Document,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    RuleBlock,
    UnorderedListBlock,
)
from .inline import (
    BoldSpan,
    CodeSpan,
    InlineSpan,
    ItalicSpan,
    LinkSpan,
    Span,
    SpanType,
    TextSpan,
    plain_text,
)

__all__ = [
    "AnyBlock",
    "Block",
    "BlockType",
    "BoldSpan",
    "CodeSpan",
    "Document",
    "HeadingBlock",
    "ImageBlock",
    "InlineSpan",
    "ItalicSpan",
    "LinkSpan",
    "ParagraphBlock",
    "RuleBlock",
    "Span",
    "SpanType",
    "TextSpan",
    "UnorderedListBlock",
    "plain_text",
]
