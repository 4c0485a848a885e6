"""Inline tokenizer: one line of text → styled spans."""

from __future__ import annotations

import re

from story_blocks.models.inline import (
    BoldSpan,
    CodeSpan,
    InlineSpan,
    ItalicSpan,
    LinkSpan,
    TextSpan,
)

# Alternation order is the priority order at a given scan position.
_INLINE_PATTERN = re.compile(
    r"\*\*(?P<bold>.+?)\*\*"
    r"|\*(?P<italic>.+?)\*"
    r"|`(?P<code>.+?)`"
    r"|\[(?P<link_text>[^\]]+)\]\((?P<link_url>[^)]+)\)"
)


def tokenize(line: str) -> list[InlineSpan]:
    """Split ``line`` into inline spans, left to right.

    The leftmost match wins; unmatched runs become ``TextSpan`` values.
    Bold and italic content is tokenized recursively. Unterminated markers
    never match and therefore stay literal text.
    """
    spans: list[InlineSpan] = []
    cursor = 0
    for match in _INLINE_PATTERN.finditer(line):
        start, end = match.span()
        if start > cursor:
            spans.append(TextSpan(text=line[cursor:start]))
        spans.append(_span_for(match))
        cursor = end

    if cursor < len(line):
        spans.append(TextSpan(text=line[cursor:]))
    if not spans:
        spans.append(TextSpan(text=line))
    return spans


def _span_for(match: re.Match[str]) -> InlineSpan:
    groups = match.groupdict()
    if groups["bold"] is not None:
        return BoldSpan(children=tuple(tokenize(groups["bold"])))
    if groups["italic"] is not None:
        return ItalicSpan(children=tuple(tokenize(groups["italic"])))
    if groups["code"] is not None:
        return CodeSpan(text=groups["code"])
    return LinkSpan(text=groups["link_text"], url=groups["link_url"])


__all__ = ["tokenize"]
