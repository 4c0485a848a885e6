"""Markdown → Block conversion for the story authoring subset."""

from __future__ import annotations

import re
from pathlib import Path

from story_blocks.models.blocks import (
    DEFAULT_IMAGE_ALT,
    MAX_HEADING_LEVEL,
    AnyBlock,
    Document,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    RuleBlock,
    UnorderedListBlock,
)
from story_blocks.models.inline import InlineSpan

from .inline import tokenize

_IMAGE_LINE = re.compile(r"^!\[(?P<alt>[^\]]*)\]\((?P<src>[^)]+)\)$")
_HEADING_LINE = re.compile(r"^(?P<hashes>#+) +(?P<content>.+)$")
_LIST_ITEM_LINE = re.compile(r"^[-*] +(?P<item>.+)$")
_RULE_LINE = "---"


def parse(document: str) -> list[AnyBlock]:
    """Return the blocks for ``document``; never raises on any string."""
    blocks: list[AnyBlock] = []
    list_items: list[tuple[InlineSpan, ...]] = []

    def flush_list() -> None:
        if list_items:
            blocks.append(UnorderedListBlock(items=tuple(list_items)))
            list_items.clear()

    # Only "\n" separates lines; "\r" from CRLF input is dropped by rstrip.
    for raw_line in document.split("\n"):
        line = raw_line.rstrip()

        if not line.strip():
            flush_list()
            continue

        image = _IMAGE_LINE.match(line)
        if image:
            flush_list()
            blocks.append(ImageBlock(alt=image.group("alt") or DEFAULT_IMAGE_ALT, src=image.group("src")))
            continue

        heading = _HEADING_LINE.match(line)
        if heading:
            flush_list()
            level = min(len(heading.group("hashes")), MAX_HEADING_LEVEL)
            blocks.append(HeadingBlock(level=level, spans=tuple(tokenize(heading.group("content")))))
            continue

        if line == _RULE_LINE:
            flush_list()
            blocks.append(RuleBlock())
            continue

        item = _LIST_ITEM_LINE.match(line)
        if item:
            list_items.append(tuple(tokenize(item.group("item"))))
            continue

        flush_list()
        blocks.append(ParagraphBlock(spans=tuple(tokenize(line))))

    flush_list()
    return blocks


def parse_document(source: str) -> Document:
    """Parse ``source`` and wrap the blocks in a ``Document`` root."""
    return Document(blocks=tuple(parse(source)))


def load_markdown_path(path: str | Path) -> list[AnyBlock]:
    """Read Markdown from disk and convert to blocks."""
    content = Path(path).read_text(encoding="utf-8")
    return parse(content)


__all__ = ["load_markdown_path", "parse", "parse_document"]
