"""
Production-specific Django settings.
"""

import os

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403,F405

DEBUG = False

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY')
if not SECRET_KEY:
    raise ImproperlyConfigured('DJANGO_SECRET_KEY must be set in production')

_default_db = DATABASES['default']  # noqa: F405
if _default_db['ENGINE'].endswith('postgresql') and os.getenv('POSTGRES_SSL', 'true').lower() == 'true':
    _default_db.setdefault('OPTIONS', {})['sslmode'] = 'require'

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_CONTENT_TYPE_NOSNIFF = True

LOGGING['formatters']['verbose']['format'] = '{levelname} {asctime} {name} {message}'  # noqa: F405
