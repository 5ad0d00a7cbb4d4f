"""Hostlist server settings."""

from typing import Final

from decouple import Csv

from server.settings.components import config

# Directory holding one HELO file per peer and transport: HOSTID.PROTOCOL
HOSTLIST_DIRECTORY = config(
    'HOSTLIST_DIRECTORY',
    default='/var/lib/gnunet/data/hosts/',
)

# Transport protocol numbers: TCP, HTTP, TCP6, UDP, UDP6, SMTP
HOSTLIST_EXTENSIONS: Final = frozenset(config(
    'HOSTLIST_EXTENSIONS',
    cast=Csv(),
    default='6,8,12,17,23,25',
))

HOSTLIST_CHUNK_SIZE = config('HOSTLIST_CHUNK_SIZE', cast=int, default=8192)

# Hostlist HTTP server host and port
HOSTLIST_HOST = config('HOSTLIST_HOST', default='0.0.0.0')  # noqa: S104
HOSTLIST_PORT = config('HOSTLIST_PORT', cast=int, default=8080)

# Worker threads and socket timeout (seconds) for cheroot
HOSTLIST_SERVER_THREADS = config(
    'HOSTLIST_SERVER_THREADS',
    cast=int,
    default=16,
)
HOSTLIST_SERVER_TIMEOUT = config(
    'HOSTLIST_SERVER_TIMEOUT',
    cast=int,
    default=16,
)
