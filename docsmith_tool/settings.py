"""
Django settings for the docsmith_tool.

This file contains only the configuration the docsmith API needs. The
app keeps no database state: it reads and writes markdown files of a
Docusaurus site whose location and languages come from the environment.

Please consult the Django documentation for additional configuration
options: https://docs.djangoproject.com/en/4.2/ref/settings/
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-change-me')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

RUNNING_TESTS = os.getenv('PYTEST_CURRENT_TEST') is not None or 'pytest' in sys.modules
if RUNNING_TESTS:
    DEBUG = True

if not DEBUG and SECRET_KEY == 'django-insecure-change-me' and not RUNNING_TESTS:
    raise ImproperlyConfigured('DJANGO_SECRET_KEY must be set when DEBUG is False.')

ALLOWED_HOSTS: list[str] = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', '127.0.0.1,localhost').split(',')
    if host.strip()
]

# Application definition
INSTALLED_APPS = [
    'docsmith',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'docsmith_tool.urls'

WSGI_APPLICATION = 'docsmith_tool.wsgi.application'

# No models: content lives in the site's markdown files.
DATABASES: dict[str, dict[str, object]] = {}

# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Security headers
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_REFERRER_POLICY = 'strict-origin-when-cross-origin'
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

if not DEBUG:
    SECURE_SSL_REDIRECT = os.getenv('DJANGO_SECURE_SSL_REDIRECT', 'true').lower() == 'true'
    SECURE_HSTS_SECONDS = int(os.getenv('DJANGO_SECURE_HSTS_SECONDS', '31536000'))
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
else:
    SECURE_SSL_REDIRECT = False

# Docusaurus site managed by docsmith
DOCSMITH_ROOT_PATH = Path(os.getenv('DOCUSAURUS_ROOT_PATH', os.getcwd()))
DOCSMITH_I18N_PATH = Path(os.getenv('DOCUSAURUS_I18N_PATH', str(DOCSMITH_ROOT_PATH)))
DOCSMITH_MEDIA_DIR = os.getenv('DOCUSAURUS_MEDIA_DIR', 'static/img')
DOCSMITH_DEFAULT_LANG = os.getenv('DOCUSAURUS_DEFAULT_LANG', 'en')
DOCSMITH_ENABLED_LANGS: list[str] = [
    lang.strip()
    for lang in os.getenv('DOCUSAURUS_ENABLED_LANGS', 'en').split(',')
    if lang.strip()
]

# Dotted path to a ``(text, target_lang) -> str`` callable used for translation.
DOCSMITH_TRANSLATOR = os.getenv('DOCSMITH_TRANSLATOR') or None


log_level = os.getenv('DJANGO_LOG_LEVEL', 'INFO').upper()
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': log_level,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': log_level,
            'propagate': False,
        },
        'docsmith': {
            'handlers': ['console'],
            'level': os.getenv('DOCSMITH_LOG_LEVEL', log_level).upper(),
            'propagate': False,
        },
    },
}
