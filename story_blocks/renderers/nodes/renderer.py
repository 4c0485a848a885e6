"""Renderer entry-point wiring node components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from story_blocks.models.blocks import Block, BlockType
from story_blocks.parser import parse
from story_blocks.renderers.base import RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS
from .node import NodeKind, RenderedNode


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class NodeRenderer(Renderer):
    _components: dict[BlockType, RendererComponent] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()

    def register(self, block_type: BlockType, component: RendererComponent) -> None:
        self._components[block_type] = component

    def render(
        self,
        blocks: Sequence[Block],
        *,
        options: RenderOptions | None = None,
    ) -> list[RenderedNode]:
        opts = options or RenderOptions()
        if not blocks:
            return [RenderedNode(kind=NodeKind.PLACEHOLDER, text=opts.empty_placeholder)]
        return [self._render_block(block, opts) for block in blocks]

    def render_document(
        self,
        raw: str,
        *,
        options: RenderOptions | None = None,
    ) -> list[RenderedNode]:
        return self.render(parse(raw), options=options)

    # Internal helpers -------------------------------------------------
    def _render_block(self, block: Block, options: RenderOptions) -> RenderedNode:
        component = self._components[block.type]
        return component.render(block, engine=self, options=options)


_DEFAULT_RENDERER = NodeRenderer()


def render(blocks: Sequence[Block], *, options: RenderOptions | None = None) -> list[RenderedNode]:
    """Render ``blocks`` with the default component set."""
    return _DEFAULT_RENDERER.render(blocks, options=options)


def render_document(raw: str, *, options: RenderOptions | None = None) -> list[RenderedNode]:
    """Parse ``raw`` and render the resulting blocks."""
    return _DEFAULT_RENDERER.render_document(raw, options=options)


__all__ = ["NodeRenderer", "render", "render_document"]
