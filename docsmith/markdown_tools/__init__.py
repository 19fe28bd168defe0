"""Markdown block splitting, translation and link-juice rewriting."""

from .blocks import (
    join_markdown_blocks,
    join_paragraphs,
    split_markdown_by_blocks,
    split_markdown_by_paragraphs,
)
from .config import dump_linkjuice_config, load_linkjuice_config, parse_linkjuice_config
from .linkjuice import transform_markdown
from .translation import Translator, translate_blocks, translate_markdown
from .types import LinkJuiceItem, MarkdownBlock, MultiLangLinkJuiceConfig

__all__ = [
    "LinkJuiceItem",
    "MarkdownBlock",
    "MultiLangLinkJuiceConfig",
    "Translator",
    "dump_linkjuice_config",
    "join_markdown_blocks",
    "join_paragraphs",
    "load_linkjuice_config",
    "parse_linkjuice_config",
    "split_markdown_by_blocks",
    "split_markdown_by_paragraphs",
    "transform_markdown",
    "translate_blocks",
    "translate_markdown",
]
