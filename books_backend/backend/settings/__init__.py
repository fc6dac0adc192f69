# backend/settings/__init__.py
"""
PATH: backend/settings/__init__.py

Settings package entrypoint.

Nothing is imported here; DJANGO_SETTINGS_MODULE selects one of:
- backend.settings.dev   (local development)
- backend.settings.test  (test runs: manage.py test / pytest)
- backend.settings.prod  (production)
"""
