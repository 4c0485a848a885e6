"""Shared NiceGUI demo state (config, renderer, saved story)."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from uuid import uuid4

from story_blocks.authoring import ImageFile
from story_blocks.config import StoryConfig, load_config
from story_blocks.renderers import NodeRenderer, RenderOptions

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DOTENV_PATH = PROJECT_ROOT / ".env"
SAMPLE_STORY = PROJECT_ROOT / "data" / "sample_story.md"
UPLOAD_DIR = PROJECT_ROOT / "data" / "uploads"
UPLOAD_ROUTE = "/uploads"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StoryFormState:
    """Stand-in for the wizard's form store; receives debounced story text."""

    story: str = ""
    revisions: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def update(self, value: str) -> None:
        with self._lock:
            self.story = value
            self.revisions += 1
            revision = self.revisions
        logger.info("Story saved to form state (revision %d, %d chars)", revision, len(value))


@dataclass(slots=True)
class StaticDirUploader:
    """Stores uploads under a directory that NiceGUI serves as static files."""

    directory: Path = UPLOAD_DIR
    route: str = UPLOAD_ROUTE

    def upload(self, file: ImageFile) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        name = f"{uuid4().hex}{Path(file.name).suffix.lower()}"
        (self.directory / name).write_bytes(file.data)
        logger.info("Stored image %s as %s", file.name, name)
        return f"{self.route}/{name}"


@dataclass(slots=True)
class DemoContext:
    config: StoryConfig
    renderer: NodeRenderer
    form: StoryFormState
    uploader: StaticDirUploader = field(default_factory=StaticDirUploader)

    def render_options(self) -> RenderOptions:
        return RenderOptions(image_base_url=self.config.image_base_url)


_CONTEXT: Optional[DemoContext] = None


def get_context() -> DemoContext:
    """Return a singleton demo context, seeding the story on first access."""

    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = _bootstrap_context()
    return _CONTEXT


def _bootstrap_context() -> DemoContext:
    config = load_config(DOTENV_PATH if DOTENV_PATH.exists() else None)
    form = StoryFormState()
    if SAMPLE_STORY.exists():
        form.story = SAMPLE_STORY.read_text(encoding="utf-8")
        logger.info("Seeded story from %s", SAMPLE_STORY.name)
    return DemoContext(config=config, renderer=NodeRenderer(), form=form)


__all__ = ["DemoContext", "StaticDirUploader", "StoryFormState", "UPLOAD_DIR", "UPLOAD_ROUTE", "get_context"]
