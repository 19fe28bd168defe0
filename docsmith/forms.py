"""Forms validating the JSON payloads of the docsmith API.

Request bodies use the camelCase keys of the editor front end; the views
map them onto these snake_case fields before validation.
"""

from __future__ import annotations

from django import forms

from .site import CONTENT_TYPES

CONTENT_TYPE_CHOICES = [(value, value) for value in CONTENT_TYPES]


class LinkJuiceForm(forms.Form):
    """Apply link juice to one file or to a list of files in a language."""

    lang = forms.CharField(max_length=16)
    file_path = forms.CharField(required=False)
    content_type = forms.ChoiceField(choices=CONTENT_TYPE_CHOICES, required=False)
    files = forms.JSONField(required=False)

    def clean_files(self) -> list[tuple[str, str]]:
        """Parse ``[{filePath, contentType}, ...]`` into tuples."""

        raw_value = self.cleaned_data.get('files')
        if raw_value in (None, ''):
            return []
        if not isinstance(raw_value, list):
            raise forms.ValidationError('"files" must be a list.')

        parsed: list[tuple[str, str]] = []
        for index, entry in enumerate(raw_value, start=1):
            if not isinstance(entry, dict):
                raise forms.ValidationError(f'File entry {index} must be an object.')
            file_path = str(entry.get('filePath') or '').strip()
            content_type = str(entry.get('contentType') or '').strip()
            if not file_path:
                raise forms.ValidationError(f'File entry {index} is missing "filePath".')
            if content_type not in CONTENT_TYPES:
                raise forms.ValidationError(
                    f'File entry {index} has an unsupported content type: {content_type or "(none)"}.'
                )
            parsed.append((file_path, content_type))
        return parsed

    def clean(self) -> dict:  # type: ignore[override]
        cleaned_data = super().clean()
        files = cleaned_data.get('files')
        if files:
            return cleaned_data
        if not (cleaned_data.get('file_path') and cleaned_data.get('content_type')):
            raise forms.ValidationError(
                'Invalid body. Provide either "files" array or "filePath"/"contentType".'
            )
        return cleaned_data

    def targets(self) -> list[tuple[str, str]]:
        """Return the ``(file_path, content_type)`` pairs to transform."""

        if self.cleaned_data.get('files'):
            return list(self.cleaned_data['files'])
        return [(self.cleaned_data['file_path'], self.cleaned_data['content_type'])]


class TranslateForm(forms.Form):
    """Translate one source file into a list of target languages."""

    file_path = forms.CharField()
    source_lang = forms.CharField(max_length=16)
    target_langs = forms.JSONField()
    content_type = forms.ChoiceField(choices=CONTENT_TYPE_CHOICES, required=False)

    def clean_target_langs(self) -> list[str]:
        raw_value = self.cleaned_data.get('target_langs')
        if not isinstance(raw_value, list) or not raw_value:
            raise forms.ValidationError('"targetLangs" must be a non-empty list.')
        langs = [str(lang).strip() for lang in raw_value if str(lang).strip()]
        if not langs:
            raise forms.ValidationError('"targetLangs" must be a non-empty list.')
        return langs

    def clean_content_type(self) -> str:
        return self.cleaned_data.get('content_type') or 'docs'
