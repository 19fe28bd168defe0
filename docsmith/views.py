"""JSON API views for the docsmith app.

The views parse request bodies, validate them with the app's forms and
delegate the work to :mod:`docsmith.services`. Known failure modes are
mapped to JSON error responses; anything else is left to Django's
standard 500 handling.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from django.core.exceptions import ImproperlyConfigured, SuspiciousFileOperation
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .forms import LinkJuiceForm, TranslateForm
from .markdown_tools import dump_linkjuice_config
from .services import (
    find_missing_translations,
    get_translator,
    read_linkjuice_config,
    transform_content_files,
    translate_content_file,
)
from .site import get_site_layout

logger = logging.getLogger(__name__)

LINKJUICE_FIELDS = {
    'lang': 'lang',
    'filePath': 'file_path',
    'contentType': 'content_type',
    'files': 'files',
}

TRANSLATE_FIELDS = {
    'filePath': 'file_path',
    'sourceLang': 'source_lang',
    'targetLangs': 'target_langs',
    'contentType': 'content_type',
}


class BadPayload(ValueError):
    """Raised when a request body is not a JSON object."""


def _form_data(request: HttpRequest, mapping: Dict[str, str]) -> Dict[str, Any]:
    try:
        payload = json.loads(request.body or b'{}')
    except json.JSONDecodeError as exc:
        raise BadPayload(f'Request body is not valid JSON: {exc.msg}') from exc
    if not isinstance(payload, dict):
        raise BadPayload('Request body must be a JSON object.')
    return {field: payload[key] for key, field in mapping.items() if key in payload}


def _error(message: str, status: int, **extra: Any) -> JsonResponse:
    return JsonResponse({'error': message, **extra}, status=status)


def _form_error(form) -> JsonResponse:
    return _error('Missing or invalid request parameters', 400, details=form.errors.get_json_data())


@csrf_exempt
@require_http_methods(['GET', 'PATCH', 'POST'])
def linkjuice(request: HttpRequest) -> JsonResponse:
    """Return the link-juice config (GET) or apply it to content files."""

    layout = get_site_layout()
    config = read_linkjuice_config(layout)
    if request.method == 'GET':
        return JsonResponse(dump_linkjuice_config(config))

    try:
        form = LinkJuiceForm(_form_data(request, LINKJUICE_FIELDS))
    except BadPayload as exc:
        return _error(str(exc), 400)
    if not form.is_valid():
        return _form_error(form)

    lang = form.cleaned_data['lang']
    targets = form.targets()
    try:
        results = transform_content_files(targets, lang, config, layout)
    except FileNotFoundError as exc:
        return _error('Content file not found', 404, details=str(exc))
    except SuspiciousFileOperation as exc:
        return _error('Invalid file path', 403, details=str(exc))

    payload = [{'message': result.message, 'changed': result.changed} for result in results]
    if form.cleaned_data.get('files'):
        return JsonResponse({'results': payload})
    return JsonResponse(payload[0])


@csrf_exempt
@require_POST
def translate(request: HttpRequest) -> JsonResponse:
    """Translate a content file into the requested languages."""

    try:
        form = TranslateForm(_form_data(request, TRANSLATE_FIELDS))
    except BadPayload as exc:
        return _error(str(exc), 400)
    if not form.is_valid():
        return _form_error(form)

    try:
        translator = get_translator()
    except ImproperlyConfigured as exc:
        logger.error('Translation requested but no translator is configured')
        return _error('Translation is not available', 503, details=str(exc))

    try:
        result = translate_content_file(
            form.cleaned_data['file_path'],
            form.cleaned_data['source_lang'],
            form.cleaned_data['target_langs'],
            form.cleaned_data['content_type'],
            translator,
            get_site_layout(),
        )
    except FileNotFoundError as exc:
        return _error('Source file not found', 404, details=str(exc))
    except SuspiciousFileOperation as exc:
        return _error('Invalid file path', 403, details=str(exc))

    return JsonResponse(
        {
            'success': True,
            'sourceLang': result.source_lang,
            'targetLangs': result.target_langs,
            'path': result.path,
        }
    )


@require_GET
def missing_translations(request: HttpRequest) -> JsonResponse:
    """List default-language docs that lack a translation."""

    missing = find_missing_translations(get_site_layout())
    return JsonResponse(
        [{'path': item.path, 'missingIn': item.missing_in} for item in missing],
        safe=False,
    )
