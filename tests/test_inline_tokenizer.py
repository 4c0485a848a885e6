from __future__ import annotations

import pytest

from story_blocks.models.inline import (
    BoldSpan,
    CodeSpan,
    ItalicSpan,
    LinkSpan,
    TextSpan,
    plain_text,
)
from story_blocks.parser import tokenize


@pytest.mark.parametrize(
    "line",
    [
        "Plain words only.",
        "Numbers 1, 2, 3 and punctuation!?",
        "   leading and trailing   ",
        "한국어 문장도 그대로",
    ],
)
def test_plain_text_is_a_single_span(line: str):
    assert tokenize(line) == [TextSpan(text=line)]


def test_empty_line_yields_empty_text_span():
    assert tokenize("") == [TextSpan(text="")]


def test_bold_italic_code_and_link_are_recognised():
    spans = tokenize("Some *italic* and **bold** with `code` and [docs](https://x.io/a).")

    assert spans == [
        TextSpan(text="Some "),
        ItalicSpan(children=(TextSpan(text="italic"),)),
        TextSpan(text=" and "),
        BoldSpan(children=(TextSpan(text="bold"),)),
        TextSpan(text=" with "),
        CodeSpan(text="code"),
        TextSpan(text=" and "),
        LinkSpan(text="docs", url="https://x.io/a"),
        TextSpan(text="."),
    ]


def test_bold_recursively_tokenizes_its_content():
    spans = tokenize("**a *b* c**")

    assert spans == [
        BoldSpan(
            children=(
                TextSpan(text="a "),
                ItalicSpan(children=(TextSpan(text="b"),)),
                TextSpan(text=" c"),
            )
        )
    ]


def test_bold_children_match_independent_tokenization():
    inner = "mixed *emphasis* and `code`"
    (bold,) = tokenize(f"**{inner}**")

    assert isinstance(bold, BoldSpan)
    assert list(bold.children) == tokenize(inner)
    assert plain_text([bold]) == "mixed emphasis and code"


def test_link_text_is_not_tokenized():
    assert tokenize("[**not bold**](http://x)") == [LinkSpan(text="**not bold**", url="http://x")]


def test_code_content_stays_literal():
    assert tokenize("`*x*`") == [CodeSpan(text="*x*")]


@pytest.mark.parametrize(
    "line",
    [
        "an unmatched ** marker",
        "a lone * star",
        "unterminated `code",
        "[broken link](",
        "[no url]",
    ],
)
def test_malformed_markers_fall_back_to_literal_text(line: str):
    spans = tokenize(line)

    assert spans == [TextSpan(text=line)]


def test_leftmost_match_wins():
    spans = tokenize("`a` **b**")

    assert spans == [
        CodeSpan(text="a"),
        TextSpan(text=" "),
        BoldSpan(children=(TextSpan(text="b"),)),
    ]


def test_bold_takes_priority_over_italic_at_same_position():
    (span,) = tokenize("**x**")

    assert isinstance(span, BoldSpan)
