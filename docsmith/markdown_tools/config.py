"""Loading and dumping the multi-language link-juice configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .types import LinkJuiceItem, MultiLangLinkJuiceConfig

logger = logging.getLogger(__name__)


def parse_linkjuice_config(data: Any) -> MultiLangLinkJuiceConfig:
    """Build typed rules from the persisted ``{lang: [{keyword, href, contentTypes}]}`` shape.

    Entries without a keyword or href are dropped, as is any language whose
    value is not a list. Rule order is preserved.
    """

    config: MultiLangLinkJuiceConfig = {}
    if not isinstance(data, dict):
        return config

    for lang, entries in data.items():
        if not isinstance(entries, list):
            continue
        items: List[LinkJuiceItem] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            keyword = str(entry.get("keyword") or "").strip()
            href = str(entry.get("href") or "").strip()
            if not keyword or not href:
                continue
            content_types = entry.get("contentTypes") or []
            if isinstance(content_types, str):
                content_types = [content_types]
            items.append(
                LinkJuiceItem(
                    keyword=keyword,
                    href=href,
                    content_types=frozenset(str(value) for value in content_types),
                )
            )
        config[str(lang)] = items
    return config


def load_linkjuice_config(path: str | Path | None = None) -> MultiLangLinkJuiceConfig:
    """Load the config file, returning an empty config when it is missing or unreadable.

    The file is a JSON document; it is read with the YAML loader, which
    accepts JSON as well as hand-written YAML.
    """

    if path is None or not Path(path).exists():
        return {}

    with Path(path).open("r", encoding="utf-8") as stream:
        try:
            data = yaml.safe_load(stream) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            logger.warning("Could not parse link-juice config %s: %s", path, exc)
            return {}
    return parse_linkjuice_config(data)


def dump_linkjuice_config(config: MultiLangLinkJuiceConfig) -> Dict[str, List[Dict[str, Any]]]:
    """Return the JSON-serialisable form of ``config``."""

    return {
        lang: [
            {
                "keyword": item.keyword,
                "href": item.href,
                "contentTypes": sorted(item.content_types),
            }
            for item in items
        ]
        for lang, items in config.items()
    }


def rules_for(config: MultiLangLinkJuiceConfig, lang: str, content_type: str) -> List[LinkJuiceItem]:
    """Return the rules of ``lang`` that apply to ``content_type``, in order."""

    return [item for item in config.get(lang, []) if item.applies_to(content_type)]
