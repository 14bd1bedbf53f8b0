"""
Selects a media type from an ``Accept`` header.

An ``Accept`` header takes the form of::

    type/subtype;param=value;q=0.5;ext=value, type/*;q=0, */*;q=0.1

Parameters before ``q`` belong to the media range; parameters after it are
extension parameters, handed back to the caller with the selected type.
"""

from collections import namedtuple
import re

from contenttype.errors import (
    InvalidMediaRange,
    InvalidMediaType,
    InvalidParameter,
    InvalidWeight,
    NoAcceptableTypeFound,
    NoAvailableTypeGiven,
    )
from contenttype.mediatype import (
    MediaType,
    _consume_parameter,
    _consume_type,
    _escape_and_quote_parameter_value,
    )

# RFC 7231 Section 5.3.1 "Quality Values"
# qvalue = ( "0" [ "." 0*3DIGIT ] )
#        / ( "1" [ "." 0*3("0") ] )
qvalue_re = (
    r'(?:0(?:\.[0-9]{0,3})?)'
    '|'
    r'(?:1(?:\.0{0,3})?)'
)
qvalue_compiled_re = re.compile('^(?:' + qvalue_re + ')$')

DEFAULT_WEIGHT = 1.0

SPECIFICITY_ANY = 0  # */*
SPECIFICITY_TYPE = 1  # type/*
SPECIFICITY_SUBTYPE = 2  # type/subtype


class MediaRange(namedtuple(
    'MediaRange', ['media_type', 'weight', 'extension_params'],
)):
    """
    One entry of an ``Accept`` header.

    *media_type* is a :class:`~contenttype.mediatype.MediaType`, whose type
    and subtype may be ``*``, and whose parameters are those that came before
    ``q``. *weight* is the ``q`` value as a ``float``. *extension_params* is a
    ``dict`` of the parameters that came after ``q``.
    """

    __slots__ = ()

    @property
    def specificity(self):
        if self.media_type.type == '*':
            return SPECIFICITY_ANY
        if self.media_type.subtype == '*':
            return SPECIFICITY_TYPE
        return SPECIFICITY_SUBTYPE

    def matches(self, media_type):
        """Return whether `media_type` falls within this range."""
        return media_type.matches(self.media_type)

    def __str__(self):
        element = str(self.media_type)
        extension_params = ''.join(
            ';' + name + '=' + _escape_and_quote_parameter_value(value)
            for name, value in self.extension_params.items()
        )
        if self.weight == DEFAULT_WEIGHT and not extension_params:
            return element
        if self.weight == int(self.weight):
            qvalue = str(int(self.weight))
        else:
            qvalue = str(self.weight)
        return '{};q={}{}'.format(element, qvalue, extension_params)


DEFAULT_RANGE = MediaRange(MediaType('*', '*'), DEFAULT_WEIGHT, {})


def _parse_weight(value):
    if qvalue_compiled_re.match(value) is None:
        raise InvalidWeight(value)
    return float(value)


def parse_accept(value):
    """
    Parse an ``Accept`` header.

    :param value: (``str`` or ``None``) header value
    :return: a list of :class:`MediaRange`, in the order they appear in the
             header. An absent or blank header is taken to be ``*/*``.
    :raises InvalidMediaType: if a media range has a missing or malformed type
                              or subtype, including an empty list element
    :raises InvalidParameter: if a parameter is malformed
    :raises InvalidWeight: if a ``q`` value is not a valid quality value
    :raises InvalidMediaRange: if a media range is followed by anything other
                               than parameters or a comma
    """
    if value is None or not value.strip():
        return [MediaRange(MediaType('*', '*'), DEFAULT_WEIGHT, {})]

    ranges = []
    pos = 0
    while pos < len(value):
        if ranges:
            # every range after the first must follow a comma
            if value[pos] != ',':
                break
            pos += 1

        consumed = _consume_type(value, pos)
        if consumed is None:
            raise InvalidMediaType(value)
        type_, subtype, pos = consumed

        params = {}
        weight = DEFAULT_WEIGHT
        extension_params = {}
        seen_q = False
        while pos < len(value) and value[pos] == ';':
            consumed = _consume_parameter(value, pos + 1)
            if consumed is None:
                raise InvalidParameter(value)
            name, param_value, pos = consumed
            if seen_q:
                extension_params[name] = param_value
            elif name == 'q':
                weight = _parse_weight(param_value)
                seen_q = True
            else:
                params[name] = param_value

        ranges.append(MediaRange(
            MediaType(type_, subtype, params), weight, extension_params,
        ))

    if pos < len(value):
        raise InvalidMediaRange(value)

    return ranges


def _governing_range(media_type, ranges):
    """
    Return the index and range that decide the weight of `media_type`.

    That is the most specific range matching `media_type`, where a range that
    names more parameters is more specific. Of equally specific ranges, the
    first one in the header wins. Return ``None`` if no range matches.
    """
    best = None
    for index, range_ in enumerate(ranges):
        if not range_.matches(media_type):
            continue
        precedence = (range_.specificity, len(range_.media_type.params))
        if best is None or precedence > best[0]:
            best = (precedence, index, range_)
    if best is None:
        return None
    return best[1], best[2]


def negotiate(accept_value, available):
    """
    Choose the media type to respond with.

    :param accept_value: (``str`` or ``None``) the ``Accept`` header value;
                         ``None`` or blank means the client accepts anything
    :param available: (sequence of :class:`~contenttype.mediatype.MediaType`)
                      the types the server can produce, in the server's order
                      of preference
    :return: a (*media_type*, *extension_params*) tuple, where *media_type* is
             the chosen item of `available` and *extension_params* is a
             ``dict`` of the extension parameters of the media range that
             selected it.
    :raises NoAvailableTypeGiven: if `available` is empty
    :raises NoAcceptableTypeFound: if the header accepts none of `available`
    :raises MediaTypeError: any of the errors of :func:`parse_accept`

    Each available type takes its weight from its most specific matching
    range, as in :rfc:`RFC 7231, section 5.3.2 <7231#section-5.3.2>`, so
    ``text/*, text/html;q=0`` rejects ``text/html`` but accepts
    ``text/plain``. Types with a weight of 0 are never chosen. Among the
    others, the best is chosen by, in order: weight; specificity of the
    matching range (``a/b`` over ``a/*`` over ``*/*``); number of parameters
    on the matching range; earliest matching range in the header; earliest
    position in `available`.
    """
    if not available:
        raise NoAvailableTypeGiven()

    ranges = parse_accept(accept_value)

    best_key = None
    best = None
    for media_type in available:
        governing = _governing_range(media_type, ranges)
        if governing is None:
            continue
        order, range_ = governing
        if not range_.weight:
            continue
        key = (
            range_.weight,
            range_.specificity,
            len(range_.media_type.params),
            -order,
        )
        # strictly greater, so the earlier available type wins a tie
        if best_key is None or key > best_key:
            best_key = key
            best = (media_type, dict(range_.extension_params))

    if best is None:
        raise NoAcceptableTypeFound(accept_value)
    return best
