"""Top-level package for the story markdown engine."""

__version__ = "0.1.0"

from .authoring import AuthoringSession  # noqa: E402
from .parser import parse, tokenize  # noqa: E402
from .renderers import render, render_document  # noqa: E402

__all__ = [
    "__version__",
    "AuthoringSession",
    "parse",
    "render",
    "render_document",
    "tokenize",
]
