"""Business logic for building and streaming hostlists."""

import logging
import random
import re
from collections.abc import Collection, Iterator
from pathlib import Path
from typing import Final

from server.apps.hostlist.infrastructure.scanner import (
    get_extension,
    scan_directory,
)

_DEFAULT_CHUNK_SIZE: Final = 8192

# Leading unsigned decimal, read the way sscanf("%llu") does
_BITMAP_PATTERN: Final = re.compile(r'\s*\+?(\d+)', re.ASCII)

logger = logging.getLogger(__name__)


def parse_protocols(raw_value: str | None) -> int | None:
    """Parse the protocol bitmap query argument.

    Args:
        raw_value: Raw ``p`` argument. Leading whitespace and a plus
            sign are allowed, trailing characters after the digits
            are ignored.

    Returns:
        Bitmap with bit ``n`` set for each accepted protocol number,
        or None (all protocols) if no leading digits are found.
    """
    if raw_value is None:
        return None
    match = _BITMAP_PATTERN.match(raw_value)
    if match is None:
        return None
    return int(match.group(1))


def accepts_protocol(path: str, protocols: int) -> bool:
    """Check whether a host file's protocol bit is set in the bitmap.

    Args:
        path: Host file path ending in ``.PROTOCOL``.
        protocols: Protocol bitmap.

    Returns:
        True if the file's protocol number is selected.
    """
    extension = get_extension(Path(path).name)
    if not extension.isascii() or not extension.isdigit():
        return False
    return bool(protocols & (1 << int(extension)))


def collect_hostlist(
    directory: str,
    extensions: Collection[str],
    protocols: int | None = None,
    rng: random.Random | None = None,
) -> list[str]:
    """Collect matching host files in random order.

    Each call re-reads the directory; nothing is cached between requests.

    Args:
        directory: Host directory to scan.
        extensions: Allowed extension tokens.
        protocols: Optional protocol bitmap narrowing the allow-list.
        rng: Random generator used for the shuffle (module default if None).

    Returns:
        Absolute paths of the files to serve, uniformly shuffled.

    Raises:
        HostlistDirectoryError: If the directory cannot be opened.
    """
    paths = scan_directory(directory, extensions)
    if protocols is not None:
        paths = [path for path in paths if accepts_protocol(path, protocols)]

    shuffler = rng or random.Random()
    shuffler.shuffle(paths)
    return paths


def stream_hostlist(
    paths: list[str],
    chunk_size: int = _DEFAULT_CHUNK_SIZE,
) -> Iterator[bytes]:
    """Yield the raw bytes of each host file in order.

    Files are concatenated without separators. A file that vanished or
    became unreadable after the scan is skipped; the response status is
    already on the wire by then.

    Args:
        paths: Host file paths in serving order.
        chunk_size: Read size in bytes.

    Yields:
        File content chunks.
    """
    files_served = 0
    bytes_served = 0
    for path in paths:
        try:
            with open(path, 'rb') as host_file:
                for chunk in iter(lambda: host_file.read(chunk_size), b''):
                    bytes_served += len(chunk)
                    yield chunk
        except OSError:
            logger.warning('Skipping unreadable host file: %s', path)
            continue
        files_served += 1

    logger.info(
        'Hostlist served: %d of %d files, %d bytes',
        files_served,
        len(paths),
        bytes_served,
    )
