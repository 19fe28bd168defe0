"""Service functions applying the markdown tools to files on disk.

These functions hold the file-level logic behind the views so it can be
unit tested without going through HTTP: reading the link-juice
configuration, rewriting a content file in place, translating a file
into the other site languages, and reporting which documents still lack
translations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .markdown_tools import (
    MultiLangLinkJuiceConfig,
    Translator,
    join_markdown_blocks,
    load_linkjuice_config,
    split_markdown_by_blocks,
    transform_markdown,
    translate_blocks,
)
from .site import SiteLayout, clean_content_path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = ('.md', '.mdx')


@dataclass(frozen=True)
class TransformResult:
    """Outcome of applying link juice to one file."""

    file_path: str
    lang: str
    content_type: str
    changed: bool

    @property
    def message(self) -> str:
        return f'File {self.file_path} transformed successfully for lang: {self.lang}.'


@dataclass(frozen=True)
class TranslationResult:
    """Files written while translating one source document."""

    path: str
    source_lang: str
    target_langs: List[str]
    written: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MissingTranslation:
    """A default-language document and the languages it is missing in."""

    path: str
    missing_in: List[str]


def read_linkjuice_config(layout: SiteLayout) -> MultiLangLinkJuiceConfig:
    """Load the link-juice rules stored in the site's media directory."""

    return load_linkjuice_config(layout.linkjuice_path)


def transform_content_file(
    file_path: str,
    content_type: str,
    lang: str,
    config: MultiLangLinkJuiceConfig,
    layout: SiteLayout,
) -> TransformResult:
    """Apply link juice to a content file and write it back in place.

    Parameters
    ----------
    file_path:
        Path of the file relative to the content directory of ``lang``.
    content_type:
        One of ``docs``, ``blog`` or ``pages``; selects both the directory
        and which rules apply.
    lang:
        Language whose directory and rules are used.
    config:
        The full multi-language rule set.
    layout:
        Site directory layout.

    Returns
    -------
    TransformResult
        Whether the file content changed.
    """

    full_path = layout.resolve_content_path(content_type, lang, file_path)
    original = full_path.read_text(encoding='utf-8')
    transformed = transform_markdown(original, config, lang, content_type)
    full_path.write_text(transformed, encoding='utf-8')
    logger.info('Applied link juice to %s (%s, %s)', full_path, lang, content_type)
    return TransformResult(
        file_path=file_path,
        lang=lang,
        content_type=content_type,
        changed=transformed != original,
    )


def transform_content_files(
    files: Sequence[tuple[str, str]],
    lang: str,
    config: MultiLangLinkJuiceConfig,
    layout: SiteLayout,
) -> List[TransformResult]:
    """Transform each ``(file_path, content_type)`` pair in order."""

    return [
        transform_content_file(file_path, content_type, lang, config, layout)
        for file_path, content_type in files
    ]


def translate_content_file(
    file_path: str,
    source_lang: str,
    target_langs: Sequence[str],
    content_type: str,
    translator: Translator,
    layout: SiteLayout,
) -> TranslationResult:
    """Translate a content file into each target language.

    The source is split into blocks once; every target language gets its
    own translated copy, written to that language's content directory.
    Missing parent directories are created. Every target path is checked
    before anything is written.

    Returns
    -------
    TranslationResult
        The cleaned path and the file written per target language.
    """

    clean_path = clean_content_path(file_path)
    source_path = layout.resolve_content_path(content_type, source_lang, clean_path)
    targets = {
        target_lang: layout.resolve_content_path(content_type, target_lang, clean_path)
        for target_lang in target_langs
    }
    blocks = split_markdown_by_blocks(source_path.read_text(encoding='utf-8'))

    written: Dict[str, str] = {}
    for target_lang, target_path in targets.items():
        translated = translate_blocks(blocks, target_lang, translator)
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(join_markdown_blocks(translated), encoding='utf-8')
        logger.info('Wrote translated file: %s', target_path)
        written[target_lang] = str(target_path)

    return TranslationResult(
        path=clean_path,
        source_lang=source_lang,
        target_langs=list(target_langs),
        written=written,
    )


def find_missing_translations(layout: SiteLayout) -> List[MissingTranslation]:
    """List default-language docs that are missing in any translation language."""

    docs_dir = layout.docs_dir
    if not docs_dir.is_dir():
        return []

    missing: List[MissingTranslation] = []
    for path in sorted(docs_dir.rglob('*')):
        if not path.is_file() or path.suffix not in MARKDOWN_SUFFIXES:
            continue
        relative = path.relative_to(docs_dir).as_posix()
        langs = [
            lang
            for lang in layout.translation_languages
            if not (layout.content_directory('docs', lang) / relative).exists()
        ]
        if langs:
            missing.append(MissingTranslation(path=relative, missing_in=langs))
    return missing


def get_translator() -> Translator:
    """Import the translator callable named by ``DOCSMITH_TRANSLATOR``."""

    dotted_path = getattr(settings, 'DOCSMITH_TRANSLATOR', None)
    if not dotted_path:
        raise ImproperlyConfigured('DOCSMITH_TRANSLATOR is not configured.')
    return import_string(dotted_path)
