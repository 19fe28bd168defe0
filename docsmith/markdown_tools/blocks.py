"""Split markdown into typed blocks and join them back together.

Blocks isolate the spans that hold prose (headings and paragraphs) from
those that must travel untouched (front matter and fenced code), so the
prose can be handed to a translator one unit at a time.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .types import CODE, FRONTMATTER, HEADING, PARAGRAPH, MarkdownBlock

FRONT_MATTER_RE = re.compile(r"^---\r?\n(.*?)\r?\n---(?:\r?\n|\Z)", re.DOTALL)
CODE_FENCE_RE = re.compile(r"^```.*?```", re.MULTILINE | re.DOTALL)
HEADING_RE = re.compile(r"^(#{1,6}[^\n]*)(?:\r?\n|$)", re.MULTILINE)
BLANK_LINES_RE = re.compile(r"\r?\n\s*\r?\n")


def split_front_matter(markdown: str) -> Tuple[str, str]:
    """Return ``(front_matter, body)``; front matter is ``''`` when absent.

    The front matter is returned verbatim, delimiters and trailing newline
    included, so ``front_matter + body == markdown`` always holds.
    """

    match = FRONT_MATTER_RE.match(markdown)
    if not match:
        return "", markdown
    return match.group(0), markdown[match.end():]


def split_markdown_by_blocks(content: str) -> List[MarkdownBlock]:
    """Split ``content`` into front matter, code, heading and paragraph blocks."""

    blocks: List[MarkdownBlock] = []
    remaining = content.lstrip()

    front_matter, body = split_front_matter(remaining)
    if front_matter:
        blocks.append(MarkdownBlock(FRONTMATTER, front_matter.strip()))
        remaining = body.lstrip()

    while True:
        match = CODE_FENCE_RE.search(remaining)
        if not match:
            break
        before = remaining[:match.start()].strip()
        if before:
            blocks.extend(_parse_headings_and_paragraphs(before))
        blocks.append(MarkdownBlock(CODE, match.group(0)))
        remaining = remaining[match.end():].lstrip()

    if remaining:
        blocks.extend(_parse_headings_and_paragraphs(remaining))

    return blocks


def _parse_headings_and_paragraphs(chunk: str) -> List[MarkdownBlock]:
    blocks: List[MarkdownBlock] = []
    last = 0
    for match in HEADING_RE.finditer(chunk):
        before = chunk[last:match.start()].strip()
        if before:
            blocks.extend(_split_paragraphs(before))
        blocks.append(MarkdownBlock(HEADING, match.group(0).rstrip()))
        last = match.end()

    tail = chunk[last:].strip()
    if tail:
        blocks.extend(_split_paragraphs(tail))
    return blocks


def _split_paragraphs(chunk: str) -> List[MarkdownBlock]:
    pieces = (piece.strip() for piece in BLANK_LINES_RE.split(chunk))
    return [MarkdownBlock(PARAGRAPH, piece) for piece in pieces if piece]


def join_markdown_blocks(blocks: Sequence[MarkdownBlock]) -> str:
    """Reassemble blocks with one blank line between them.

    No blank line is put directly after front matter, and the result always
    ends with a single newline.
    """

    parts: List[str] = []
    previous: MarkdownBlock | None = None
    for block in blocks:
        if previous is not None and previous.type != FRONTMATTER:
            parts.append("\n")
        parts.append(block.content.rstrip() + "\n")
        previous = block
    return "".join(parts).rstrip() + "\n"


def split_markdown_by_paragraphs(content: str) -> List[str]:
    """Split on blank lines, left-trimming each piece. Empty pieces are kept."""

    return [piece.lstrip() for piece in BLANK_LINES_RE.split(content)]


def join_paragraphs(paragraphs: Sequence[str]) -> str:
    return "\n\n".join(paragraphs)
