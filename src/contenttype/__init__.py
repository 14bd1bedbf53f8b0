from contenttype.errors import (
    InvalidMediaRange,
    InvalidMediaType,
    InvalidParameter,
    InvalidWeight,
    MediaTypeError,
    NoAcceptableTypeFound,
    NoAvailableTypeGiven,
    )
from contenttype.mediatype import (
    MediaType,
    extract_content_type,
    format_media_type,
    new_media_type,
    parse_media_type,
    )
from contenttype.negotiation import MediaRange, negotiate, parse_accept
from contenttype.request import get_acceptable_media_type, get_media_type

__all__ = [
    'MediaType', 'MediaRange',
    'parse_media_type', 'format_media_type', 'new_media_type',
    'extract_content_type', 'parse_accept', 'negotiate',
    'get_media_type', 'get_acceptable_media_type',
    'MediaTypeError', 'InvalidMediaType', 'InvalidMediaRange',
    'InvalidParameter', 'InvalidWeight', 'NoAvailableTypeGiven',
    'NoAcceptableTypeFound',
]
