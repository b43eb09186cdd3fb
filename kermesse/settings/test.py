"""
Settings used by the pytest suite.
"""

from .base import *  # noqa: F403,F405

SECRET_KEY = 'test-secret-key'

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

LOGGING['root']['level'] = 'WARNING'  # noqa: F405
LOGGING['loggers']['django']['level'] = 'WARNING'  # noqa: F405

# Threads in the concurrency tests need to share one on-disk test database
if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':  # noqa: F405
    DATABASES['default']['TEST'] = {'NAME': BASE_DIR / 'test_db.sqlite3'}  # noqa: F405
