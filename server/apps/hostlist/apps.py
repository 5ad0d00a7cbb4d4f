"""Django app configuration for hostlist app."""

from django.apps import AppConfig


class HostlistConfig(AppConfig):
    """Configuration for hostlist app."""

    name = 'server.apps.hostlist'
    verbose_name = 'Hostlist'
