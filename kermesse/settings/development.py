"""
Development-specific Django settings.
"""

from .base import *  # noqa: F403,F405

DEBUG = True

ALLOWED_HOSTS = ['*']

# Logging Configuration - Development (Verbose console output)
LOGGING['handlers']['console']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['inventory'] = {  # noqa: F405
    'handlers': ['console'],
    'level': 'DEBUG',
    'propagate': False,
}
LOGGING['loggers']['sales'] = {  # noqa: F405
    'handlers': ['console'],
    'level': 'DEBUG',
    'propagate': False,
}
