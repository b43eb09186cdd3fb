"""
Django settings package for the kermesse backend.

This package contains environment-specific settings modules:
- base.py: Common settings for all environments
- development.py: Local development (SQLite unless POSTGRES_DB is set)
- production.py: Production deployment
- test.py: pytest runs

The appropriate settings module is loaded based on the DJANGO_SETTINGS_MODULE
environment variable.
"""
