from __future__ import annotations

import pytest

from story_blocks.models.blocks import (
    BlockType,
    Document,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    RuleBlock,
    UnorderedListBlock,
)
from story_blocks.models.inline import BoldSpan, ItalicSpan, TextSpan
from story_blocks.parser import load_markdown_path, parse, parse_document


def test_empty_source_yields_no_blocks():
    assert parse("") == []
    assert parse("\n\n   \n") == []


def test_markdown_parser_emits_core_blocks():
    source = "# Title\n\nSome *italic* and **bold** text.\n\n- one\n- two\n\n---"

    blocks = parse(source)

    assert [block.type for block in blocks] == [
        BlockType.HEADING,
        BlockType.PARAGRAPH,
        BlockType.UNORDERED_LIST,
        BlockType.RULE,
    ]
    heading, paragraph, bullet_list, _ = blocks
    assert heading.level == 1
    assert heading.spans == (TextSpan(text="Title"),)
    assert paragraph.spans == (
        TextSpan(text="Some "),
        ItalicSpan(children=(TextSpan(text="italic"),)),
        TextSpan(text=" and "),
        BoldSpan(children=(TextSpan(text="bold"),)),
        TextSpan(text=" text."),
    )
    assert len(bullet_list.items) == 2
    assert bullet_list.items[0] == (TextSpan(text="one"),)


def test_image_line_defaults_missing_alt():
    assert parse("![](http://x/y.png)") == [ImageBlock(alt="image", src="http://x/y.png")]


def test_image_line_keeps_alt_text():
    (image,) = parse("![Studio shot](/uploads/a.jpg)   ")

    assert image.alt == "Studio shot"
    assert image.src == "/uploads/a.jpg"


def test_inline_image_is_not_an_image_block():
    (block,) = parse("See ![x](y.png) here")

    assert isinstance(block, ParagraphBlock)


@pytest.mark.parametrize("hashes", range(1, 11))
def test_heading_level_is_clamped_to_four(hashes: int):
    (heading,) = parse(f"{'#' * hashes} Heading")

    assert isinstance(heading, HeadingBlock)
    assert heading.level == min(hashes, 4)
    assert heading.spans == (TextSpan(text="Heading"),)


def test_hash_without_space_is_a_paragraph():
    (block,) = parse("#hashtag")

    assert isinstance(block, ParagraphBlock)


@pytest.mark.parametrize("count", [1, 2, 5])
def test_consecutive_items_collapse_into_one_list(count: int):
    lines = [f"{'-' if index % 2 else '*'} item {index}" for index in range(count)]
    source = "\n\n" + "\n".join(lines) + "\n\n"

    blocks = parse(source)

    assert len(blocks) == 1
    assert isinstance(blocks[0], UnorderedListBlock)
    assert len(blocks[0].items) == count


def test_blank_line_splits_lists():
    blocks = parse("- a\n- b\n\n- c")

    assert [len(block.items) for block in blocks] == [2, 1]


def test_non_list_line_flushes_pending_list():
    blocks = parse("- a\nplain\n- b\n# Head\n- c\n---\n- d\n![i](u)\n- e")

    assert [block.type for block in blocks] == [
        BlockType.UNORDERED_LIST,
        BlockType.PARAGRAPH,
        BlockType.UNORDERED_LIST,
        BlockType.HEADING,
        BlockType.UNORDERED_LIST,
        BlockType.RULE,
        BlockType.UNORDERED_LIST,
        BlockType.IMAGE,
        BlockType.UNORDERED_LIST,
    ]


def test_list_items_are_inline_tokenized():
    (bullet_list,) = parse("- **bold** item")

    assert bullet_list.items[0] == (BoldSpan(children=(TextSpan(text="bold"),)), TextSpan(text=" item"))


def test_bold_line_is_not_a_list_item():
    (block,) = parse("**Heads up** this is a paragraph")

    assert isinstance(block, ParagraphBlock)


def test_rule_allows_trailing_whitespace_only():
    assert parse("---   ") == [RuleBlock()]
    assert isinstance(parse("--- x")[0], ParagraphBlock)


def test_each_line_becomes_its_own_paragraph():
    blocks = parse("first line\nsecond line")

    assert [block.spans for block in blocks] == [
        (TextSpan(text="first line"),),
        (TextSpan(text="second line"),),
    ]


def test_crlf_line_endings_are_accepted():
    blocks = parse("# Title\r\n\r\n- a\r\n- b\r\n")

    assert [block.type for block in blocks] == [BlockType.HEADING, BlockType.UNORDERED_LIST]


def test_parse_is_pure(sample_story: str):
    first = parse(sample_story)
    second = parse(sample_story)

    assert first == second
    assert first is not second


def test_parse_document_wraps_blocks(sample_story: str):
    document = parse_document(sample_story)

    assert isinstance(document, Document)
    assert list(document.blocks) == parse(sample_story)


def test_load_markdown_path_reads_utf8(tmp_path):
    path = tmp_path / "story.md"
    path.write_text("## 소개\n- 하나", encoding="utf-8")

    blocks = load_markdown_path(path)

    assert blocks[0] == HeadingBlock(level=2, spans=(TextSpan(text="소개"),))
    assert isinstance(blocks[1], UnorderedListBlock)


def test_sample_story_structure(sample_story: str):
    blocks = parse(sample_story)

    assert [block.type for block in blocks] == [
        BlockType.HEADING,
        BlockType.PARAGRAPH,
        BlockType.HEADING,
        BlockType.UNORDERED_LIST,
        BlockType.IMAGE,
        BlockType.RULE,
        BlockType.PARAGRAPH,
    ]
    assert len(blocks[3].items) == 3


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85", "\x0c", "\x1c", "\x0b"])
def test_only_newline_separates_lines(separator: str):
    (paragraph,) = parse(f"a{separator}b")

    assert paragraph.spans == (TextSpan(text=f"a{separator}b"),)


@pytest.mark.parametrize("line", ["#\tTitle", "##\tTitle", "-\titem", "*\titem"])
def test_tab_after_marker_is_a_paragraph(line: str):
    (block,) = parse(line)

    assert isinstance(block, ParagraphBlock)
    assert block.spans == (TextSpan(text=line),)


def test_document_validates_blocks_by_type_tag():
    document = Document.model_validate(
        {
            "blocks": [
                {"type": "heading", "level": 3, "spans": [{"type": "text", "text": "Plan"}]},
                {"type": "rule"},
                {"type": "image", "src": "/uploads/a.png"},
            ]
        }
    )

    assert list(document.blocks) == [
        HeadingBlock(level=3, spans=(TextSpan(text="Plan"),)),
        RuleBlock(),
        ImageBlock(alt="image", src="/uploads/a.png"),
    ]
