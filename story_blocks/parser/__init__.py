"""Parsing helpers for story markdown."""

from .inline import tokenize
from .markdown_parser import load_markdown_path, parse, parse_document

__all__ = [
    "load_markdown_path",
    "parse",
    "parse_document",
    "tokenize",
]
