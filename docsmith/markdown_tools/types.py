"""Typed data structures shared by the markdown tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

FRONTMATTER = "frontmatter"
CODE = "code"
HEADING = "heading"
PARAGRAPH = "paragraph"

BLOCK_TYPES: FrozenSet[str] = frozenset({FRONTMATTER, CODE, HEADING, PARAGRAPH})

# Blocks whose content is human-readable prose.
TRANSLATABLE_TYPES: FrozenSet[str] = frozenset({HEADING, PARAGRAPH})


@dataclass(frozen=True)
class MarkdownBlock:
    """A contiguous slice of a markdown document with its structural role."""

    type: str
    content: str


@dataclass(frozen=True)
class LinkJuiceItem:
    """A keyword that should link to ``href`` in the given content types."""

    keyword: str
    href: str
    content_types: FrozenSet[str] = field(default_factory=frozenset)

    def applies_to(self, content_type: str) -> bool:
        return content_type in self.content_types


# Language code -> rules, in precedence order.
MultiLangLinkJuiceConfig = Dict[str, List[LinkJuiceItem]]
