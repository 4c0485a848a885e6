"""Markdown renderer: rebuilds authoring text from parsed blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from story_blocks.models.blocks import (
    Block,
    BlockType,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    UnorderedListBlock,
)
from story_blocks.models.inline import BoldSpan, CodeSpan, ItalicSpan, LinkSpan, Span
from story_blocks.renderers.base import RenderOptions, Renderer, RendererComponent


@dataclass(slots=True)
class MarkdownRenderer(Renderer):
    _components: dict[BlockType, RendererComponent] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self._components:
            self._components = {
                BlockType.HEADING: HeadingComponent(),
                BlockType.PARAGRAPH: ParagraphComponent(),
                BlockType.UNORDERED_LIST: UnorderedListComponent(),
                BlockType.IMAGE: ImageComponent(),
                BlockType.RULE: RuleComponent(),
            }

    def register(self, block_type: BlockType, component: RendererComponent) -> None:
        self._components[block_type] = component

    def render(
        self,
        blocks: Sequence[Block],
        *,
        options: RenderOptions | None = None,
    ) -> str:
        opts = options or RenderOptions()
        sections = [
            self._components[block.type].render(block, engine=self, options=opts)
            for block in blocks
        ]
        return "\n\n".join(section for section in sections if section)


def spans_to_markdown(spans: Iterable[Span]) -> str:
    parts: list[str] = []
    for span in spans:
        if isinstance(span, BoldSpan):
            parts.append(f"**{spans_to_markdown(span.children)}**")
        elif isinstance(span, ItalicSpan):
            parts.append(f"*{spans_to_markdown(span.children)}*")
        elif isinstance(span, CodeSpan):
            parts.append(f"`{span.text}`")
        elif isinstance(span, LinkSpan):
            parts.append(f"[{span.text}]({span.url})")
        else:
            parts.append(span.text)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Component implementations


class HeadingComponent:
    def render(self, block: HeadingBlock, *, engine: Renderer, options: RenderOptions) -> str:  # noqa: ARG002
        return f"{'#' * block.level} {spans_to_markdown(block.spans)}"


class ParagraphComponent:
    def render(self, block: ParagraphBlock, *, engine: Renderer, options: RenderOptions) -> str:  # noqa: ARG002
        return spans_to_markdown(block.spans)


class UnorderedListComponent:
    def render(self, block: UnorderedListBlock, *, engine: Renderer, options: RenderOptions) -> str:  # noqa: ARG002
        return "\n".join(f"- {spans_to_markdown(item)}" for item in block.items)


class ImageComponent:
    def render(self, block: ImageBlock, *, engine: Renderer, options: RenderOptions) -> str:  # noqa: ARG002
        return f"![{block.alt}]({block.src})"


class RuleComponent:
    def render(self, block: Block, *, engine: Renderer, options: RenderOptions) -> str:  # noqa: ARG002
        return "---"


def render_markdown(blocks: Sequence[Block]) -> str:
    """Rebuild story markdown from ``blocks`` with the default components."""
    return MarkdownRenderer().render(blocks)


__all__ = ["MarkdownRenderer", "render_markdown", "spans_to_markdown"]
