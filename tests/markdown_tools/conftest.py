"""Shared fixtures for markdown tools tests."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import pytest

from docsmith.markdown_tools.config import parse_linkjuice_config


@pytest.fixture()
def sample_doc() -> str:
    return "---\ntitle: Foo\n---\n# H\n\nPara one.\n\n```js\ncode();\n```\n"


@pytest.fixture()
def make_config():
    """Build a config from ``lang -> [(keyword, href[, content_types])]`` tuples."""

    def build(**langs: Iterable[tuple]):
        data = {}
        for lang, rules in langs.items():
            entries = []
            for rule in rules:
                keyword, href, *rest = rule
                content_types = rest[0] if rest else ("docs",)
                entries.append({"keyword": keyword, "href": href, "contentTypes": list(content_types)})
            data[lang] = entries
        return parse_linkjuice_config(data)

    return build


@pytest.fixture()
def widget_config(make_config):
    """English config linking ``widget`` in docs only."""

    return make_config(en=[("widget", "/docs/widget")])


@pytest.fixture()
def recording_translator():
    """Translator that tags text with the language and records each call."""

    calls: List[Tuple[str, str]] = []

    def translate(text: str, target_lang: str) -> str:
        calls.append((text, target_lang))
        return f"{text} ({target_lang})"

    translate.calls = calls  # type: ignore[attr-defined]
    return translate
