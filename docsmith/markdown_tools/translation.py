"""Block-level translation of markdown documents.

The translator itself is injected: any callable taking ``(text,
target_lang)`` and returning the translated text. Only heading and
paragraph blocks are sent to it; front matter and fenced code are copied
through as-is.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Sequence

from .blocks import (
    join_markdown_blocks,
    join_paragraphs,
    split_markdown_by_blocks,
    split_markdown_by_paragraphs,
)
from .types import TRANSLATABLE_TYPES, MarkdownBlock

logger = logging.getLogger(__name__)

Translator = Callable[[str, str], str]


def translate_chunk(chunk: str, target_lang: str, translator: Translator) -> str:
    """Translate a single chunk, falling back to the original on an empty reply."""

    if not chunk.strip():
        return chunk
    return translator(chunk, target_lang) or chunk


def translate_blocks(
    blocks: Sequence[MarkdownBlock],
    target_lang: str,
    translator: Translator,
) -> List[MarkdownBlock]:
    """Return a translated copy of ``blocks``; the input is left untouched."""

    translated: List[MarkdownBlock] = []
    for index, block in enumerate(blocks):
        if block.type not in TRANSLATABLE_TYPES:
            translated.append(block)
            continue
        logger.debug("Translating block %d (%s) to %s", index, block.type, target_lang)
        translated.append(
            replace(block, content=translate_chunk(block.content, target_lang, translator))
        )
    return translated


def translate_markdown(content: str, target_lang: str, translator: Translator) -> str:
    blocks = split_markdown_by_blocks(content)
    return join_markdown_blocks(translate_blocks(blocks, target_lang, translator))


def translate_markdown_by_paragraphs(
    content: str,
    target_lang: str,
    translator: Translator,
    splitter: Callable[[str], List[str]] = split_markdown_by_paragraphs,
    joiner: Callable[[Sequence[str]], str] = join_paragraphs,
) -> str:
    """Translate paragraph by paragraph, with pluggable splitting and joining."""

    paragraphs = splitter(content)
    return joiner([translate_chunk(paragraph, target_lang, translator) for paragraph in paragraphs])
