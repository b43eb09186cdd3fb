"""
Base Django settings for the kermesse point-of-sale backend.
Common settings shared across all environments.
"""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-secret-key-change-in-production')

DEBUG = False

ALLOWED_HOSTS = os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

# Application definition
INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',
    # Third-party apps
    'rest_framework',
    'django_filters',
    'drf_yasg',
    # Local apps
    'inventory',
    'sales',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'kermesse.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'kermesse.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'kermesse.wsgi.application'

# Database: PostgreSQL when POSTGRES_DB is set, SQLite otherwise
if os.getenv('POSTGRES_DB'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('POSTGRES_DB'),
            'USER': os.getenv('POSTGRES_USER', 'postgres'),
            'PASSWORD': os.getenv('POSTGRES_PASSWORD', 'postgres'),
            'HOST': os.getenv('POSTGRES_HOST', 'localhost'),
            'PORT': os.getenv('POSTGRES_PORT', '5432'),
            'CONN_MAX_AGE': int(os.getenv('POSTGRES_CONN_MAX_AGE', '60')),
            'OPTIONS': {
                # Bounds every sale/correction/reset transaction
                'options': f"-c statement_timeout={os.getenv('POSTGRES_STATEMENT_TIMEOUT_MS', '10000')}",
            },
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
            'OPTIONS': {
                # Writers take the database lock at BEGIN instead of deadlocking on upgrade
                'transaction_mode': 'IMMEDIATE',
                'timeout': int(os.getenv('SQLITE_TIMEOUT_SECONDS', '20')),
            },
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Internationalization
LANGUAGE_CODE = 'es'
TIME_ZONE = os.getenv('DJANGO_TIME_ZONE', 'America/La_Paz')
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Django REST Framework Configuration
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
    'EXCEPTION_HANDLER': 'kermesse.exceptions.custom_exception_handler',
}

SWAGGER_SETTINGS = {
    'USE_SESSION_AUTH': False,
}

# Cross-origin access for the polling dashboard
CORS_ALLOWED_ORIGINS = os.getenv('CORS_ALLOWED_ORIGINS', '*').split(',')
CORS_ALLOWED_METHODS = ['GET', 'POST', 'PUT', 'DELETE']
CORS_ALLOW_CREDENTIALS = True

# Teams and their fundraising quotas, in reporting order
KERMESSE_TEAMS = [
    {'key': 'lobatos-rovers', 'name': 'Lobatos/Rovers', 'quota': 70},
    {'key': 'exploradores', 'name': 'Exploradores', 'quota': 50},
    {'key': 'pioneros', 'name': 'Pioneros', 'quota': 50},
    {'key': 'comision', 'name': 'Comisión Ejecutiva', 'quota': 25},
]

# Catalog inserted when the dish table is empty
KERMESSE_DISHES = [
    {'name': 'Pollo al Horno', 'stock': 65, 'cost_price': '20.00', 'sale_price': '35.00'},
    {'name': 'Fricassé', 'stock': 65, 'cost_price': '18.00', 'sale_price': '35.00'},
    {'name': 'Chicharrón', 'stock': 65, 'cost_price': '22.00', 'sale_price': '35.00'},
]

if os.getenv('KERMESSE_TEAMS'):
    KERMESSE_TEAMS = json.loads(os.getenv('KERMESSE_TEAMS'))

if os.getenv('KERMESSE_DISHES'):
    KERMESSE_DISHES = json.loads(os.getenv('KERMESSE_DISHES'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
