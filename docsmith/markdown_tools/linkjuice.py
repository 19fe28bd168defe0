"""Rewrite configured keywords in markdown prose into links.

The body is parsed with markdown-it-py so that only plain prose is
touched: text inside links, images and headings is left alone, and code
never surfaces as text at all. The edited token stream is rendered back
to markdown with mdformat.
"""

from __future__ import annotations

import re
from functools import partial
from typing import Mapping, Sequence

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdformat.renderer import MDRenderer, RenderContext, RenderTreeNode

from .blocks import split_front_matter
from .config import rules_for
from .types import LinkJuiceItem, MultiLangLinkJuiceConfig

# Text below any of these nodes is never rewritten
SKIP_ANCESTORS: set[str] = {"link", "image", "heading"}

# Word boundary regex template used when compiling keyword matchers
WORD_BOUNDARY = r"\b{term}\b"

LINK_SYNTAX = "]("

_ESCAPED_LINK_CHAR = re.compile(r"\\([\[\]()])")

# Destination of an inserted link and backslash escapes of ASCII punctuation
_LINK_DESTINATION = re.compile(r"\]\(([^()\s]*)\)")
_ESCAPED_PUNCTUATION = re.compile(r"\\([!-/:-@\[-`{-~])")


def _unescape_destination(match: re.Match[str]) -> str:
    return "](" + _ESCAPED_PUNCTUATION.sub(r"\1", match.group(1)) + ")"


def _unescape_link_syntax(text: str, node: RenderTreeNode, context: RenderContext) -> str:
    text = _ESCAPED_LINK_CHAR.sub(r"\1", text)
    return _LINK_DESTINATION.sub(_unescape_destination, text)


class _LinkSyntaxPlugin:
    """mdformat plugin that keeps inserted link syntax in text unescaped."""

    RENDERERS: Mapping = {}
    POSTPROCESSORS: Mapping = {"text": _unescape_link_syntax}


def build_markdown_parser() -> MarkdownIt:
    """Return a CommonMark parser whose renderer emits markdown."""

    mdit = MarkdownIt("commonmark", renderer_cls=MDRenderer)
    mdit.options["mdformat"] = {"number": True, "wrap": "keep", "end_of_line": "lf"}
    mdit.options["store_labels"] = True
    mdit.options["parser_extension"] = [_LinkSyntaxPlugin]
    mdit.options["codeformatters"] = {}
    return mdit


def keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(WORD_BOUNDARY.format(term=re.escape(keyword)), flags=re.IGNORECASE)


def _linkify(match: re.Match[str], href: str) -> str:
    full = match.string
    start, end = match.span()
    word = match.group(0)

    if LINK_SYNTAX in full[max(0, start - 2):start] or LINK_SYNTAX in full[end:end + 2]:
        return word
    if f"[{word}](" in full[max(0, start - 5):end + 5]:
        return word
    return f"[{word}]({href})"


def link_keywords(text: str, rules: Sequence[LinkJuiceItem]) -> str:
    """Apply each rule in turn to ``text``.

    Every keyword's pattern runs once over the string left by the previous
    keywords, so a later keyword may match inside a label inserted earlier.
    """

    for rule in rules:
        text = keyword_pattern(rule.keyword).sub(partial(_linkify, href=rule.href), text)
    return text


def _is_prose(node: SyntaxTreeNode) -> bool:
    parent = node.parent
    while parent is not None:
        if parent.type in SKIP_ANCESTORS:
            return False
        parent = parent.parent
    return True


def transform_markdown(
    markdown: str,
    config: MultiLangLinkJuiceConfig,
    lang: str,
    content_type: str,
) -> str:
    """Link keywords configured for ``lang``/``content_type`` in ``markdown``.

    Front matter is carried over verbatim. When no rule applies the input is
    returned unchanged, without being re-rendered.
    """

    front_matter, body = split_front_matter(markdown)

    rules = rules_for(config, lang, content_type)
    if not rules:
        return markdown

    mdit = build_markdown_parser()
    env: dict = {}
    tokens = mdit.parse(body, env)

    for node in SyntaxTreeNode(tokens).walk():
        if node.type != "text" or not node.token or not node.token.content:
            continue
        if not _is_prose(node):
            continue
        node.token.content = link_keywords(node.token.content, rules)

    rendered = mdit.renderer.render(tokens, mdit.options, env)
    return front_matter + rendered
