from django.apps import AppConfig


class DocsmithConfig(AppConfig):
    """Configuration for the docsmith Django app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'docsmith'
