"""Authoring session: the editor-side owner of a story's raw markdown."""

from __future__ import annotations

import logging
from typing import Callable

from story_blocks.config import StoryConfig
from story_blocks.renderers.base import RenderOptions
from story_blocks.renderers.nodes import RenderedNode, render_document

from .debounce import Debouncer, TimerFactory
from .images import (
    ImageAccepted,
    ImageFile,
    ImageResult,
    ImageUploader,
    ObjectUrlRegistry,
    check_image,
    embed_line,
)
from .templates import template_for

logger = logging.getLogger(__name__)

SNIPPET_SEPARATOR = "\n\n"


class AuthoringSession:
    """Holds the text buffer and pushes edits to the owner on a trailing debounce.

    ``on_change`` receives the latest buffer once per quiet period. Object URLs
    created for pasted images are revoked as soon as their embed line leaves the
    buffer, and all remaining ones on :meth:`close`.
    """

    def __init__(
        self,
        on_change: Callable[[str], None],
        initial: str = "",
        *,
        config: StoryConfig | None = None,
        timer_factory: TimerFactory | None = None,
        urls: ObjectUrlRegistry | None = None,
    ) -> None:
        self.config = config or StoryConfig()
        self._text = initial or ""
        self._urls = urls if urls is not None else ObjectUrlRegistry()
        # Minted by accept_image but not yet seen in the buffer.
        self._unplaced_urls: set[str] = set()
        self._debouncer: Debouncer[str] = Debouncer(
            self.config.debounce_seconds,
            on_change,
            timer_factory=timer_factory,
        )
        self._closed = False

    # Buffer -------------------------------------------------------------
    @property
    def text(self) -> str:
        return self._text

    @property
    def char_count(self) -> int:
        return len(self._text)

    @property
    def is_over_limit(self) -> bool:
        """Advisory only; nothing blocks an author from going over."""
        return self.char_count > self.config.max_chars

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def object_urls(self) -> ObjectUrlRegistry:
        return self._urls

    def set_text(self, next_text: str) -> None:
        """Replace the buffer for local echo and reschedule the owner update."""
        self._ensure_open()
        self._text = next_text
        self._release_orphaned_urls()
        self._debouncer.schedule(self._text)

    def sync_external(self, value: str | None) -> bool:
        """Adopt the owner's value when it differs; returns whether it did."""
        value = value or ""
        if value == self._text:
            return False
        self._debouncer.cancel()
        self._text = value
        self._release_orphaned_urls()
        return True

    def append_snippet(self, snippet: str) -> str:
        self._ensure_open()
        self._text = f"{self._text}{SNIPPET_SEPARATOR}{snippet}" if self._text else snippet
        self._release_orphaned_urls()
        self._debouncer.schedule(self._text)
        return self._text

    def insert_template(self, key: str) -> str:
        return self.append_snippet(template_for(key).body)

    # Images -------------------------------------------------------------
    def accept_image(self, file: ImageFile) -> ImageResult:
        """Validate ``file`` and mint a local URL for it; never touches the buffer."""
        self._ensure_open()
        rejection = check_image(file, max_bytes=self.config.max_image_bytes)
        if rejection is not None:
            logger.debug("Rejected image %s (%d bytes): %s", file.name, file.size, rejection.reason)
            return rejection
        url = self._urls.create(file)
        self._unplaced_urls.add(url)
        return ImageAccepted(embed_line=embed_line(url), url=url)

    def paste_image(self, file: ImageFile) -> ImageResult:
        result = self.accept_image(file)
        if isinstance(result, ImageAccepted):
            self.append_snippet(result.embed_line)
        return result

    def discard_image(self, local_url: str) -> bool:
        """Release a local URL whose embed line the caller will not insert."""
        self._unplaced_urls.discard(local_url)
        return self._urls.revoke(local_url)

    def commit_image(self, local_url: str, uploader: ImageUploader) -> str:
        """Upload the file behind ``local_url`` and swap in its durable URL.

        Upload errors propagate and leave the local URL in place.
        """
        self._ensure_open()
        file = self._urls.get(local_url)
        if file is None:
            raise ValueError(f"Unknown local image URL: {local_url}")

        durable_url = uploader.upload(file)
        if local_url in self._text:
            self._text = self._text.replace(local_url, durable_url)
            self._debouncer.schedule(self._text)
        self._urls.revoke(local_url)
        self._unplaced_urls.discard(local_url)
        logger.debug("Committed image %s as %s", file.name, durable_url)
        return durable_url

    # Preview ------------------------------------------------------------
    def preview(self, options: RenderOptions | None = None) -> list[RenderedNode]:
        opts = options or RenderOptions(image_base_url=self.config.image_base_url)
        return render_document(self._text, options=opts)

    # Lifecycle ----------------------------------------------------------
    def flush(self) -> None:
        self._debouncer.flush()

    def close(self) -> None:
        if self._closed:
            return
        self._debouncer.cancel()
        self._urls.revoke_all()
        self._unplaced_urls.clear()
        self._closed = True

    def __enter__(self) -> AuthoringSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Internal helpers -------------------------------------------------
    def _release_orphaned_urls(self) -> None:
        for url in self._urls.urls():
            if url in self._text:
                self._unplaced_urls.discard(url)
            elif url not in self._unplaced_urls:
                self._urls.revoke(url)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Authoring session is closed.")


__all__ = ["AuthoringSession", "SNIPPET_SEPARATOR"]
