"""Image acceptance, embed lines, and local object-URL bookkeeping."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from story_blocks.config import DEFAULT_MAX_IMAGE_BYTES
from story_blocks.models.blocks import DEFAULT_IMAGE_ALT

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = DEFAULT_MAX_IMAGE_BYTES
OBJECT_URL_PREFIX = "blob:story/"

REASON_TOO_LARGE = "file too large"
REASON_NOT_IMAGE = "not an image"


@dataclass(frozen=True, slots=True)
class ImageFile:
    """A pasted or selected file as handed over by the editor surface."""

    name: str
    size: int
    content_type: str | None = None
    data: bytes = b""


@dataclass(frozen=True, slots=True)
class ImageAccepted:
    embed_line: str
    url: str


@dataclass(frozen=True, slots=True)
class ImageRejected:
    reason: str


ImageResult = ImageAccepted | ImageRejected


class ImageUploader(Protocol):
    """Persists a file and returns its durable URL."""

    def upload(self, file: ImageFile) -> str:
        ...


def embed_line(url: str, alt: str = DEFAULT_IMAGE_ALT) -> str:
    """Markdown line the block parser reads back as an image block."""
    return f"![{alt}]({url})"


def check_image(file: ImageFile, *, max_bytes: int = MAX_IMAGE_BYTES) -> ImageRejected | None:
    """Return the rejection for ``file``, or ``None`` when it may be embedded."""
    if file.size > max_bytes:
        return ImageRejected(reason=REASON_TOO_LARGE)
    if file.content_type and not file.content_type.startswith("image/"):
        return ImageRejected(reason=REASON_NOT_IMAGE)
    return None


class ObjectUrlRegistry:
    """Hands out ``blob:story/<id>`` URLs that stay valid until revoked."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[str, ImageFile] = {}

    def create(self, file: ImageFile) -> str:
        url = f"{OBJECT_URL_PREFIX}{uuid4()}"
        with self._lock:
            self._files[url] = file
        return url

    def get(self, url: str) -> ImageFile | None:
        with self._lock:
            return self._files.get(url)

    def revoke(self, url: str) -> bool:
        with self._lock:
            released = self._files.pop(url, None) is not None
        if released:
            logger.debug("Revoked object URL %s", url)
        return released

    def revoke_all(self) -> int:
        with self._lock:
            count = len(self._files)
            self._files.clear()
        if count:
            logger.debug("Revoked %d object URL(s)", count)
        return count

    def urls(self) -> list[str]:
        with self._lock:
            return list(self._files)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._files

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)


__all__ = [
    "ImageAccepted",
    "ImageFile",
    "ImageRejected",
    "ImageResult",
    "ImageUploader",
    "MAX_IMAGE_BYTES",
    "OBJECT_URL_PREFIX",
    "ObjectUrlRegistry",
    "REASON_NOT_IMAGE",
    "REASON_TOO_LARGE",
    "check_image",
    "embed_line",
]
