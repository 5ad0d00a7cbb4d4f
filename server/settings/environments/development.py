"""
This file contains all the settings that defines the development server.

SECURITY WARNING: don't run with debug turned on in production!
"""

from server.settings.components.common import SECRET_KEY

# Setting the development status:

DEBUG = True

# Fallback so the server starts without a `config/.env` file:
SECRET_KEY = SECRET_KEY or 'django-insecure-hostlist-development-key'  # noqa: S105
