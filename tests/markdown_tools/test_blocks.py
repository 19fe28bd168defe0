"""Block splitting and joining tests."""

from __future__ import annotations

from docsmith.markdown_tools.blocks import (
    join_markdown_blocks,
    join_paragraphs,
    split_front_matter,
    split_markdown_by_blocks,
    split_markdown_by_paragraphs,
)
from docsmith.markdown_tools.types import MarkdownBlock

MESSY_DOC = (
    "\n\n  ---\ntitle: Messy\n---\n\n\nIntro line one\nintro line two\n   \n\n"
    "## Setup   \nInstall it.\n\n\n```bash\npip install thing\n\n\nthing --help\n```\n"
    "Trailing words\n### Deep\n\n\n\nlast paragraph   \n\n"
)


def _without_whitespace(text: str) -> str:
    return "".join(text.split())


def test_sample_document_splits_into_typed_blocks(sample_doc):
    blocks = split_markdown_by_blocks(sample_doc)

    assert blocks == [
        MarkdownBlock("frontmatter", "---\ntitle: Foo\n---"),
        MarkdownBlock("heading", "# H"),
        MarkdownBlock("paragraph", "Para one."),
        MarkdownBlock("code", "```js\ncode();\n```"),
    ]


def test_sample_document_joins_back_verbatim(sample_doc):
    assert join_markdown_blocks(split_markdown_by_blocks(sample_doc)) == sample_doc


def test_blocks_keep_document_order_and_drop_no_text():
    blocks = split_markdown_by_blocks(MESSY_DOC)

    assert [block.type for block in blocks] == [
        "frontmatter",
        "paragraph",
        "heading",
        "paragraph",
        "code",
        "paragraph",
        "heading",
        "paragraph",
    ]
    joined_contents = "".join(block.content for block in blocks)
    assert _without_whitespace(joined_contents) == _without_whitespace(MESSY_DOC)


def test_code_block_content_is_verbatim():
    blocks = split_markdown_by_blocks(MESSY_DOC)
    code = [block for block in blocks if block.type == "code"]

    assert code == [MarkdownBlock("code", "```bash\npip install thing\n\n\nthing --help\n```")]


def test_round_trip_is_stable_after_first_join():
    once = join_markdown_blocks(split_markdown_by_blocks(MESSY_DOC))
    twice = join_markdown_blocks(split_markdown_by_blocks(once))

    assert twice == once
    assert split_markdown_by_blocks(once) == split_markdown_by_blocks(twice)


def test_join_normalises_spacing():
    blocks = [
        MarkdownBlock("frontmatter", "---\na: 1\n---\n\n"),
        MarkdownBlock("heading", "# Title"),
        MarkdownBlock("paragraph", "Body text.   "),
        MarkdownBlock("code", "```\nx\n```"),
    ]

    assert join_markdown_blocks(blocks) == "---\na: 1\n---\n# Title\n\nBody text.\n\n```\nx\n```\n"


def test_split_of_joined_blocks_reproduces_them():
    blocks = [
        MarkdownBlock("frontmatter", "---\na: 1\n---"),
        MarkdownBlock("paragraph", "First paragraph\nspans two lines."),
        MarkdownBlock("heading", "## Next"),
        MarkdownBlock("code", "```py\nprint('hi')\n\n\nprint('bye')\n```"),
        MarkdownBlock("paragraph", "Closing."),
    ]

    assert split_markdown_by_blocks(join_markdown_blocks(blocks)) == blocks


def test_unterminated_front_matter_is_body_text():
    blocks = split_markdown_by_blocks("---\ntitle: x\n\nBody")

    assert blocks == [
        MarkdownBlock("paragraph", "---\ntitle: x"),
        MarkdownBlock("paragraph", "Body"),
    ]


def test_crlf_front_matter_is_recognised():
    blocks = split_markdown_by_blocks("---\r\ntitle: x\r\n---\r\nBody")

    assert blocks[0] == MarkdownBlock("frontmatter", "---\r\ntitle: x\r\n---")
    assert blocks[1] == MarkdownBlock("paragraph", "Body")


def test_headings_split_paragraphs_without_blank_lines():
    blocks = split_markdown_by_blocks("Intro text\n## Section   \nMore text\n\nLast")

    assert blocks == [
        MarkdownBlock("paragraph", "Intro text"),
        MarkdownBlock("heading", "## Section"),
        MarkdownBlock("paragraph", "More text"),
        MarkdownBlock("paragraph", "Last"),
    ]


def test_text_after_last_code_block_is_parsed():
    blocks = split_markdown_by_blocks("```\nraw\n```\nafter\n# Tail")

    assert blocks == [
        MarkdownBlock("code", "```\nraw\n```"),
        MarkdownBlock("paragraph", "after"),
        MarkdownBlock("heading", "# Tail"),
    ]


def test_empty_and_blank_input():
    assert split_markdown_by_blocks("") == []
    assert split_markdown_by_blocks(" \n\t\n") == []
    assert join_markdown_blocks([]) == "\n"


def test_split_front_matter_keeps_exact_text():
    front_matter, body = split_front_matter("---\nid: intro\n---\nHello\n")

    assert front_matter == "---\nid: intro\n---\n"
    assert body == "Hello\n"
    assert split_front_matter("No front matter") == ("", "No front matter")


def test_paragraph_helpers():
    assert split_markdown_by_paragraphs("a\n\n  b\n \nc") == ["a", "b", "c"]
    assert split_markdown_by_paragraphs("a\n\n\n\nb") == ["a", "b"]
    assert join_paragraphs(["a", "b"]) == "a\n\nb"


def test_indented_heading_in_paragraph_settles_after_second_round():
    once = join_markdown_blocks(split_markdown_by_blocks("p\n\n  # h\nq"))
    twice = join_markdown_blocks(split_markdown_by_blocks(once))

    assert once == "p\n\n# h\nq\n"
    assert twice == "p\n\n# h\n\nq\n"
    assert join_markdown_blocks(split_markdown_by_blocks(twice)) == twice
