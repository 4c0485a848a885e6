"""Editor-side helpers: the authoring session and its collaborators."""

from .debounce import Debouncer
from .images import (
    MAX_IMAGE_BYTES,
    ImageAccepted,
    ImageFile,
    ImageRejected,
    ImageUploader,
    ObjectUrlRegistry,
    embed_line,
)
from .session import AuthoringSession
from .templates import STORY_TEMPLATES, StoryTemplate, template_for

__all__ = [
    "AuthoringSession",
    "Debouncer",
    "ImageAccepted",
    "ImageFile",
    "ImageRejected",
    "ImageUploader",
    "MAX_IMAGE_BYTES",
    "ObjectUrlRegistry",
    "STORY_TEMPLATES",
    "StoryTemplate",
    "embed_line",
    "template_for",
]
