"""
Django settings for server project.

The hostlist service needs no database, sessions or templates,
so only the request/response machinery is configured here.
"""

from decouple import Csv

from server.settings.components import BASE_DIR, config  # noqa: F401

SECRET_KEY = config('DJANGO_SECRET_KEY', default='')

ALLOWED_HOSTS = config('DJANGO_ALLOWED_HOSTS', cast=Csv(), default='*')

# Application definition:

INSTALLED_APPS: tuple[str, ...] = (
    # Your apps go here:
    'server.apps.hostlist',
)

MIDDLEWARE: tuple[str, ...] = (
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
)

ROOT_URLCONF = 'server.urls'

WSGI_APPLICATION = 'server.wsgi.application'

# No database: hostlist files are read straight from disk
DATABASES: dict[str, dict[str, str]] = {}

# Hostlist URLs are served at the root, no slash redirects
APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = 'UTC'
