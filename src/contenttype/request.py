"""
Content type handling for WSGI requests.

These read the ``Content-Type`` and ``Accept`` headers out of a WSGI environ
and hand them to :mod:`contenttype.mediatype` and
:mod:`contenttype.negotiation`. What to respond with when they raise (usually
``415 Unsupported Media Type`` or ``406 Not Acceptable``) is up to the caller.
"""

import logging

from contenttype.errors import MediaTypeError, NoAcceptableTypeFound
from contenttype.mediatype import extract_content_type
from contenttype.negotiation import negotiate
from contenttype.util import environ_header

log = logging.getLogger(__name__)


def get_media_type(environ):
    """
    Return the :class:`~contenttype.mediatype.MediaType` of the request body.

    The zero ``MediaType()`` is returned when the request has no
    ``Content-Type`` header.

    :raises MediaTypeError: if the header is malformed
    """
    header_value = environ_header(environ, 'Content-Type')
    try:
        return extract_content_type(header_value)
    except MediaTypeError as e:
        log.debug("rejected Content-Type %r: %s", header_value, e)
        raise


def get_acceptable_media_type(environ, available):
    """
    Return the best of `available` for the request's ``Accept`` header.

    A request without an ``Accept`` header accepts anything, so the first
    item of `available` is returned.

    :return: a (*media_type*, *extension_params*) tuple, see
             :func:`~contenttype.negotiation.negotiate`
    :raises MediaTypeError: see :func:`~contenttype.negotiation.negotiate`
    """
    header_value = environ_header(environ, 'Accept')
    try:
        return negotiate(header_value, available)
    except NoAcceptableTypeFound:
        log.debug(
            "no acceptable type for Accept %r among %s",
            header_value, ', '.join(str(media_type) for media_type in available),
        )
        raise
    except MediaTypeError as e:
        log.debug("rejected Accept %r: %s", header_value, e)
        raise
