"""Node renderer component implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

from story_blocks.models.blocks import (
    Block,
    BlockType,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    UnorderedListBlock,
)
from story_blocks.models.inline import BoldSpan, CodeSpan, ItalicSpan, LinkSpan, Span
from story_blocks.renderers.base import RenderOptions, RendererComponent, resolve_image_url

from .node import NodeKind, RenderedNode

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import NodeRenderer

# Level 1 is the largest; anything deeper than four never reaches here.
HEADING_SIZES: dict[int, str] = {1: "2xl", 2: "xl", 3: "lg", 4: "base"}


# ---------------------------------------------------------------------------
# Rendering context & base component


@dataclass(slots=True)
class RenderContext:
    engine: "NodeRenderer"
    options: RenderOptions

    def render_spans(self, spans: Iterable[Span]) -> tuple[RenderedNode, ...]:
        return tuple(self.render_span(span) for span in spans)

    def render_span(self, span: Span) -> RenderedNode:
        if isinstance(span, BoldSpan):
            return RenderedNode(kind=NodeKind.STRONG, children=self.render_spans(span.children))
        if isinstance(span, ItalicSpan):
            return RenderedNode(kind=NodeKind.EMPHASIS, children=self.render_spans(span.children))
        if isinstance(span, CodeSpan):
            return RenderedNode(kind=NodeKind.CODE, text=span.text)
        if isinstance(span, LinkSpan):
            return RenderedNode(
                kind=NodeKind.LINK,
                text=span.text,
                attrs={
                    "href": span.url,
                    "target": self.options.link_target,
                    "rel": self.options.link_rel,
                },
            )
        return RenderedNode(kind=NodeKind.TEXT, text=span.text)


class BaseComponent(RendererComponent):
    def render(
        self,
        block: Block,
        *,
        engine: "NodeRenderer",
        options: RenderOptions,
    ) -> RenderedNode:
        ctx = RenderContext(engine=engine, options=options)
        return self.render_block(block, ctx)

    def render_block(self, block: Block, ctx: RenderContext) -> RenderedNode:  # pragma: no cover - abstract
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Component implementations


class HeadingComponent(BaseComponent):
    def render_block(self, block: HeadingBlock, ctx: RenderContext) -> RenderedNode:
        level = max(1, min(block.level, len(HEADING_SIZES)))
        return RenderedNode(
            kind=NodeKind.HEADING,
            attrs={"level": str(level), "size": HEADING_SIZES[level]},
            children=ctx.render_spans(block.spans),
        )


class ParagraphComponent(BaseComponent):
    def render_block(self, block: ParagraphBlock, ctx: RenderContext) -> RenderedNode:
        return RenderedNode(kind=NodeKind.PARAGRAPH, children=ctx.render_spans(block.spans))


class UnorderedListComponent(BaseComponent):
    def render_block(self, block: UnorderedListBlock, ctx: RenderContext) -> RenderedNode:
        items = tuple(
            RenderedNode(kind=NodeKind.LIST_ITEM, children=ctx.render_spans(item))
            for item in block.items
        )
        return RenderedNode(kind=NodeKind.LIST, attrs={"style": "bullet"}, children=items)


class ImageComponent(BaseComponent):
    def render_block(self, block: ImageBlock, ctx: RenderContext) -> RenderedNode:
        src = resolve_image_url(block.src, ctx.options.image_base_url) or ""
        alt = block.alt.strip() or ctx.options.image_fallback_alt
        return RenderedNode(kind=NodeKind.IMAGE, attrs={"src": src, "alt": alt})


class RuleComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> RenderedNode:  # noqa: ARG002
        return RenderedNode(kind=NodeKind.RULE)


DEFAULT_COMPONENTS: dict[BlockType, RendererComponent] = {
    BlockType.HEADING: HeadingComponent(),
    BlockType.PARAGRAPH: ParagraphComponent(),
    BlockType.UNORDERED_LIST: UnorderedListComponent(),
    BlockType.IMAGE: ImageComponent(),
    BlockType.RULE: RuleComponent(),
}


__all__ = [
    "BaseComponent",
    "DEFAULT_COMPONENTS",
    "HEADING_SIZES",
    "HeadingComponent",
    "ImageComponent",
    "ParagraphComponent",
    "RenderContext",
    "RuleComponent",
    "UnorderedListComponent",
]
