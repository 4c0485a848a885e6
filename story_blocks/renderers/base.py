"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from story_blocks.models.blocks import Block

_PASSTHROUGH_SCHEMES = ("http://", "https://", "blob:", "data:")


@dataclass(slots=True)
class RenderOptions:
    image_base_url: str | None = None
    image_fallback_alt: str = "story image"
    empty_placeholder: str = "No story content has been written yet."
    link_target: str = "_blank"
    link_rel: str = "noopener noreferrer"


class Renderer(Protocol):
    def render(
        self,
        blocks: Sequence[Block],
        *,
        options: RenderOptions | None = None,
    ) -> Any:
        ...


class RendererComponent(Protocol):
    def render(
        self,
        block: Block,
        *,
        engine: Renderer,
        options: RenderOptions,
    ) -> Any:
        ...


def resolve_image_url(path: str | None, base_url: str | None = None) -> str | None:
    """Turn a stored image path into an address the preview surface can load.

    - Absolute ``http(s)``, ``blob:`` and ``data:`` URLs are returned as-is.
    - Relative paths are joined to ``base_url`` when one is configured.
    """
    if not path:
        return None
    if path.startswith(_PASSTHROUGH_SCHEMES) or not base_url:
        return path

    base = base_url[:-1] if base_url.endswith("/") else base_url
    if path.startswith("/"):
        return f"{base}{path}"
    return f"{base}/{path}"


__all__ = ["RenderOptions", "Renderer", "RendererComponent", "resolve_image_url"]
