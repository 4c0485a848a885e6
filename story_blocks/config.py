"""Runtime configuration for the authoring session and preview."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DEBOUNCE_SECONDS = 0.3
DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_CHARS = 20_000


@dataclass(slots=True)
class StoryConfig:
    """Editor limits and preview settings; unset fields fall back to the environment."""

    debounce_seconds: float | None = None
    max_image_bytes: int | None = None
    max_chars: int | None = None
    image_base_url: str | None = None

    def __post_init__(self) -> None:
        if self.debounce_seconds is None:
            self.debounce_seconds = _env_number("STORY_DEBOUNCE_SECONDS", float, DEFAULT_DEBOUNCE_SECONDS)
        if self.max_image_bytes is None:
            self.max_image_bytes = _env_number("STORY_MAX_IMAGE_BYTES", int, DEFAULT_MAX_IMAGE_BYTES)
        if self.max_chars is None:
            self.max_chars = _env_number("STORY_MAX_CHARS", int, DEFAULT_MAX_CHARS)
        if self.image_base_url is None:
            self.image_base_url = os.getenv("STORY_IMAGE_BASE_URL") or None

        if self.debounce_seconds < 0:
            raise ValueError("debounce_seconds cannot be negative.")
        if self.max_image_bytes <= 0:
            raise ValueError("max_image_bytes must be positive.")
        if self.max_chars <= 0:
            raise ValueError("max_chars must be positive.")


def load_config(dotenv_path: str | Path | None = None) -> StoryConfig:
    """Load ``.env`` (without overriding real env vars) and build a config."""
    if dotenv_path is not None:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()
    return StoryConfig()


def _env_number(name: str, cast: type, default: float | int) -> float | int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, received {raw!r}.") from exc


__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "DEFAULT_MAX_CHARS",
    "DEFAULT_MAX_IMAGE_BYTES",
    "StoryConfig",
    "load_config",
]
