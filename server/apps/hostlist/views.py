"""Hostlist HTTP views."""

import logging
from typing import Final

from django.conf import settings
from django.http import HttpRequest, HttpResponse, StreamingHttpResponse
from django.views.decorators.http import require_safe

from server.apps.hostlist.exceptions import HostlistDirectoryError
from server.apps.hostlist.logic.aggregation import (
    collect_hostlist,
    parse_protocols,
    stream_hostlist,
)

_CONTENT_TYPE: Final = 'application/octet-stream'
_ERROR_CONTENT_TYPE: Final = 'text/plain'
_PROTOCOLS_ARGUMENT: Final = 'p'

logger = logging.getLogger(__name__)


@require_safe
def hostlist(request: HttpRequest) -> HttpResponse | StreamingHttpResponse:
    """Serve all matching host files, shuffled and concatenated.

    The optional ``p`` query argument is a decimal protocol bitmap
    narrowing which transports are returned.

    Args:
        request: Incoming GET or HEAD request.

    Returns:
        Streaming octet-stream response, or a plain-text 500 response
        if the host directory cannot be opened. HEAD requests get the
        same status and headers with an empty body.
    """
    protocols = parse_protocols(request.GET.get(_PROTOCOLS_ARGUMENT))
    try:
        paths = collect_hostlist(
            settings.HOSTLIST_DIRECTORY,
            settings.HOSTLIST_EXTENSIONS,
            protocols=protocols,
        )
    except HostlistDirectoryError as error:
        return HttpResponse(
            b'' if request.method == 'HEAD' else str(error),
            status=500,
            content_type=_ERROR_CONTENT_TYPE,
        )

    # Neither Django nor the WSGI server strips bodies from HEAD responses
    if request.method == 'HEAD':
        return HttpResponse(content_type=_CONTENT_TYPE)

    logger.debug(
        'Serving %d host files (protocols: %s)',
        len(paths),
        protocols,
    )
    return StreamingHttpResponse(
        stream_hostlist(paths, settings.HOSTLIST_CHUNK_SIZE),
        content_type=_CONTENT_TYPE,
    )
