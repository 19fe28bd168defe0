"""Directory layout of the Docusaurus site being managed.

Default-language content lives in ``docs/``, ``blog/`` and ``src/pages/``
under the site root; translations follow the Docusaurus i18n convention
under ``i18n/<lang>/``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation

CONTENT_TYPES: Tuple[str, ...] = ('docs', 'blog', 'pages')

DEFAULT_ROOTS: Dict[str, str] = {
    'docs': 'docs',
    'blog': 'blog',
    'pages': 'src/pages',
}

I18N_ROOTS: Dict[str, str] = {
    'docs': 'docusaurus-plugin-content-docs/current',
    'blog': 'docusaurus-plugin-content-blog',
    'pages': 'src/pages',
}

LINKJUICE_FILENAME = 'linkjuice.json'

LANG_PREFIX_RE = re.compile(r'^/[a-z]{2}/')


@dataclass(frozen=True)
class SiteLayout:
    """Resolved filesystem locations and languages of the site."""

    root_dir: Path
    i18n_dir: Path
    media_dir: Path
    default_language: str = 'en'
    enabled_languages: List[str] = field(default_factory=lambda: ['en'])

    @property
    def docs_dir(self) -> Path:
        return self.root_dir / DEFAULT_ROOTS['docs']

    @property
    def translation_languages(self) -> List[str]:
        """Enabled languages other than the default one."""
        return [lang for lang in self.enabled_languages if lang != self.default_language]

    @property
    def linkjuice_path(self) -> Path:
        return self.media_dir / LINKJUICE_FILENAME

    def content_directory(self, content_type: str, lang: str) -> Path:
        """Return the directory holding ``content_type`` files for ``lang``.

        Only enabled languages map to a directory; any other code raises
        ``SuspiciousFileOperation`` since it ends up as a path segment.
        """

        if content_type not in CONTENT_TYPES:
            raise ValueError(f'Unsupported content type: {content_type}')
        if lang not in self.enabled_languages:
            raise SuspiciousFileOperation(f'Language {lang!r} is not enabled for this site.')
        if lang == self.default_language:
            return self.root_dir / DEFAULT_ROOTS[content_type]
        return self.i18n_dir / lang / I18N_ROOTS[content_type]

    def resolve_content_path(self, content_type: str, lang: str, file_path: str) -> Path:
        """Return the absolute path of ``file_path`` within its content directory.

        Raises ``SuspiciousFileOperation`` when the path escapes the directory.
        """

        directory = self.content_directory(content_type, lang).resolve()
        relative = clean_content_path(file_path).lstrip('/')
        candidate = (directory / relative).resolve()
        if candidate != directory and directory not in candidate.parents:
            raise SuspiciousFileOperation(f'Path {file_path!r} is outside the {content_type} directory.')
        return candidate


def clean_content_path(file_path: str) -> str:
    """Drop a leading two-letter language segment, e.g. ``/fr/intro.md`` -> ``/intro.md``."""

    return LANG_PREFIX_RE.sub('/', file_path)


def get_site_layout() -> SiteLayout:
    """Build the layout from the ``DOCSMITH_*`` settings."""

    root_dir = Path(settings.DOCSMITH_ROOT_PATH)
    i18n_base = Path(getattr(settings, 'DOCSMITH_I18N_PATH', None) or root_dir)
    return SiteLayout(
        root_dir=root_dir,
        i18n_dir=i18n_base / 'i18n',
        media_dir=root_dir / getattr(settings, 'DOCSMITH_MEDIA_DIR', 'static/img'),
        default_language=getattr(settings, 'DOCSMITH_DEFAULT_LANG', 'en'),
        enabled_languages=list(getattr(settings, 'DOCSMITH_ENABLED_LANGS', ['en'])),
    )
