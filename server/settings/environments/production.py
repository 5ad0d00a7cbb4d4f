"""
This file contains all the settings used in production.

This file is required and if development.py is present these
values are overridden.
"""

from server.settings.components import config

# Production flags:

DEBUG = False

SECRET_KEY = config('DJANGO_SECRET_KEY')

SECURE_CONTENT_TYPE_NOSNIFF = True
