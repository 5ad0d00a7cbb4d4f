"""Django management command to run the hostlist HTTP server."""

import logging
import os
import sys
from typing import Any, final, override

from cheroot.wsgi import Server as WSGIServer
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.wsgi import get_wsgi_application

logger = logging.getLogger(__name__)

# Environment variable to indicate we're in a reload subprocess
_RELOAD_ENV_VAR = 'HOSTLIST_RELOAD_SUBPROCESS'


@final
class Command(BaseCommand):
    """Run the hostlist server using cheroot WSGI server."""

    help = 'Run the integrated HTTP hostlist server'

    @override
    def add_arguments(self, parser: Any) -> None:
        """Add command arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--host',
            type=str,
            default=None,
            help='Host to bind to (default: from settings)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to bind to (default: from settings)',
        )
        parser.add_argument(
            '--threads',
            type=int,
            default=None,
            help='Worker threads (default: from settings)',
        )
        parser.add_argument(
            '--reload',
            action='store_true',
            default=False,
            help='Enable auto-reload on code changes (development only)',
        )

    @override
    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Args:
            args: Positional arguments.
            options: Keyword arguments from command line.
        """
        use_reload = options['reload']
        is_subprocess = os.environ.get(_RELOAD_ENV_VAR) == 'true'

        if use_reload and not is_subprocess:
            # Parent process: run file watcher
            self._run_with_reload(options)
        else:
            self._run_server(options)

    def _run_server(self, options: dict[str, Any]) -> None:
        """Run the hostlist server directly.

        Args:
            options: Command options.
        """
        host = options['host'] or settings.HOSTLIST_HOST
        port = options['port'] or settings.HOSTLIST_PORT
        threads = options['threads'] or settings.HOSTLIST_SERVER_THREADS

        self.stdout.write(
            self.style.SUCCESS(
                f'Starting hostlist server on {host}:{port}, '
                f'serving {settings.HOSTLIST_DIRECTORY}',
            ),
        )

        server = WSGIServer(
            bind_addr=(host, port),
            wsgi_app=get_wsgi_application(),
            numthreads=threads,
            timeout=settings.HOSTLIST_SERVER_TIMEOUT,
        )

        # Set server name for HTTP headers
        server.server_name = 'Hostlist'

        try:
            logger.info(
                'Hostlist server starting on %s:%d with %d threads',
                host,
                port,
                threads,
            )
            server.start()
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING('\nShutting down...'))
        finally:
            server.stop()
            self.stdout.write(self.style.SUCCESS('Hostlist server stopped'))

    def _run_with_reload(self, options: dict[str, Any]) -> None:
        """Run server with auto-reload on file changes.

        Uses watchfiles to monitor Python files and restart the server
        when changes are detected.

        Args:
            options: Command options.
        """
        try:
            import watchfiles  # noqa: PLC0415
        except ImportError:
            self.stderr.write(
                self.style.ERROR(
                    'watchfiles is required for --reload. '
                    'Install with: pip install -e ".[dev]"',
                ),
            )
            sys.exit(1)

        self.stdout.write(
            self.style.SUCCESS(
                'Starting hostlist server with auto-reload enabled...',
            ),
        )

        # Build command to run in subprocess (as string for watchfiles)
        cmd_parts = [sys.executable, '-m', 'django', 'run_hostlist_server']
        if options['host']:
            cmd_parts.extend(['--host', options['host']])
        if options['port']:
            cmd_parts.extend(['--port', str(options['port'])])
        if options['threads']:
            cmd_parts.extend(['--threads', str(options['threads'])])
        cmd = ' '.join(cmd_parts)

        watch_dirs = [
            str(settings.BASE_DIR / 'server'),
        ]

        def watch_filter(  # noqa: WPS430
            change: watchfiles.Change,
            path: str,
        ) -> bool:
            """Filter to only watch Python files."""
            return path.endswith('.py')

        # Set env var so subprocess knows it's being managed by reloader
        os.environ[_RELOAD_ENV_VAR] = 'true'

        watchfiles.run_process(
            *watch_dirs,
            target=cmd,
            target_type='command',
            watch_filter=watch_filter,
            callback=self._on_reload,
        )

    def _on_reload(self, changes: set[tuple[Any, str]]) -> None:
        """Callback when files change and reload is triggered.

        Args:
            changes: Set of (change_type, path) tuples.
        """
        for change_type, path in changes:
            self.stdout.write(
                self.style.WARNING(
                    f'Detected {change_type.name}: {path}',
                ),
            )
        self.stdout.write(
            self.style.SUCCESS('Reloading hostlist server...'),
        )
