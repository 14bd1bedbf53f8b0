"""
Errors raised while parsing media types and negotiating content.

Every error is a :class:`MediaTypeError`, which is itself a ``ValueError``, so
callers that only care whether a header was usable can catch either. Callers
that need to tell the failures apart (for example to answer ``415`` rather
than ``406``) catch the specific class.
"""


class MediaTypeError(ValueError):
    """Base class for all content type errors."""

    message = 'invalid content type'

    def __init__(self, *args):
        if not args:
            args = (self.message,)
        super().__init__(*args)


class InvalidMediaType(MediaTypeError):
    """The type or subtype is empty, malformed, or followed by junk."""

    message = 'invalid media type'


class InvalidMediaRange(MediaTypeError):
    """A media range in an ``Accept`` header is followed by junk."""

    message = 'invalid media range'


class InvalidParameter(MediaTypeError):
    """A ``name=value`` parameter is malformed."""

    message = 'invalid parameter'


class InvalidWeight(MediaTypeError):
    """A ``q`` parameter is not a valid quality value."""

    message = 'invalid weight'


class NoAvailableTypeGiven(MediaTypeError):
    message = 'no available type given'


class NoAcceptableTypeFound(MediaTypeError):
    message = 'no acceptable type found'
