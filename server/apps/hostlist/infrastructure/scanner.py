"""Host directory scanning utilities."""

import logging
import os
from collections.abc import Collection
from pathlib import Path
from typing import Final

from server.apps.hostlist.exceptions import HostlistDirectoryError

# Host files are named HOSTID.PROTOCOL
_EXTENSION_SEPARATOR: Final = '.'

logger = logging.getLogger(__name__)


def get_extension(filename: str) -> str:
    """Get hostlist extension from filename.

    The extension is everything after the first dot. Encoded host
    identities never contain a dot, so for real host files this is
    the transport protocol number.

    Args:
        filename: Bare filename (e.g., 'ABCD1234.6').

    Returns:
        Extension without dot (e.g., '6').
        Returns empty string if there is no dot or the name starts with one.
    """
    position = filename.find(_EXTENSION_SEPARATOR)
    if position <= 0:
        return ''
    return filename[position + 1:]


def scan_directory(directory: str, extensions: Collection[str]) -> list[str]:
    """List host files in a directory.

    Keeps regular files (including symlinks to regular files) whose
    extension is in the allow-list. Subdirectories are never descended.

    Args:
        directory: Host directory to scan.
        extensions: Allowed extension tokens (e.g., {'6', '17'}).

    Returns:
        Absolute paths of matching files, in directory order.

    Raises:
        HostlistDirectoryError: If the directory cannot be opened.
    """
    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except OSError as error:
        logger.exception('Failed to open hostlist directory: %s', directory)
        raise HostlistDirectoryError(directory) from error

    paths = []
    for entry in entries:
        if not entry.is_file():
            continue
        if get_extension(entry.name) not in extensions:
            continue
        paths.append(str(Path(entry.path).absolute()))

    logger.debug(
        'Scanned %s: %d of %d entries match',
        directory,
        len(paths),
        len(entries),
    )
    return paths
