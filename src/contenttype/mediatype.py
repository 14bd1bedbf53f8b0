"""
Parses and formats media types, as found in the ``Content-Type`` header.

A media type takes the form of::

    type/subtype; name1=value1; name2="quoted value"

The type, the subtype and the parameter names are case-insensitive and are
folded to lowercase. Parameter values are folded to lowercase too.
"""

from collections import namedtuple
import re

from contenttype.errors import InvalidMediaType, InvalidParameter

# RFC 7230 Section 3.2.3 "Whitespace"
# OWS            = *( SP / HTAB )
#                ; optional whitespace
OWS_re = '[ \t]*'

# RFC 7230 Section 3.2.6 "Field Value Components":
# tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                / DIGIT / ALPHA
tchar_re = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]"

# token          = 1*tchar
token_re = tchar_re + '+'
token_compiled_re = re.compile('^' + token_re + '$')

# RFC 7230 Section 3.2.6 "Field Value Components":
# quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE
# qdtext        = HTAB / SP /%x21 / %x23-5B / %x5D-7E / obs-text
# quoted-pair   = "\" ( HTAB / SP / VCHAR / obs-text )
# Here no character below %x20 is allowed, HTAB included, escaped or not.
# Every other character is, DEL and non-ASCII text included.
qdtext_re = r'[^\x00-\x1f"\\]'
quoted_pair_re = r'\\[^\x00-\x1f]'
# The group holds the content between the quotes, still escaped
quoted_string_re = \
    '"((?:(?:' + qdtext_re + ')|(?:' + quoted_pair_re + '))*)"'
quoted_pair_compiled_re = re.compile(r'\\(.)', re.DOTALL)

# RFC 7231 Section 3.1.1.1 "Media Type":
# media-type = type "/" subtype *( OWS ";" OWS parameter )
# type       = token
# subtype    = token
# parameter  = token "=" ( token / quoted-string )
type_subtype_compiled_re = re.compile(
    OWS_re + '(' + token_re + ')/(' + token_re + ')' + OWS_re,
)
parameter_compiled_re = re.compile(
    OWS_re + '(' + token_re + ')=' +
    '(?:(' + token_re + ')|' + quoted_string_re + ')' +
    OWS_re,
)


def _consume_type(value, pos):
    """
    Match ``type/subtype`` at `pos`, with any surrounding whitespace.

    Return a (type, subtype, end position) tuple, or ``None`` if there is no
    valid type and subtype at `pos`. A ``*`` type is only valid together with
    a ``*`` subtype.
    """
    match = type_subtype_compiled_re.match(value, pos)
    if match is None:
        return None
    type_, subtype = match.group(1).lower(), match.group(2).lower()
    if type_ == '*' and subtype != '*':
        return None
    return type_, subtype, match.end()


def _consume_parameter(value, pos):
    """
    Match a ``name=value`` parameter at `pos`, with any surrounding whitespace.

    Return a (name, value, end position) tuple, or ``None`` if there is no
    valid parameter at `pos`. Quoted values are unquoted and unescaped.
    """
    match = parameter_compiled_re.match(value, pos)
    if match is None:
        return None
    name, token, quoted = match.groups()
    if quoted is not None:
        # RFC 7230, section 3.2.6 "Field Value Components": "Recipients that
        # process the value of a quoted-string MUST handle a quoted-pair as if
        # it were replaced by the octet following the backslash."
        param_value = quoted_pair_compiled_re.sub(r'\1', quoted)
    else:
        param_value = token
    return name.lower(), param_value.lower(), match.end()


def _escape_and_quote_parameter_value(param_value):
    """
    Escape and quote parameter value where necessary.
    """
    if param_value == '':
        param_value = '""'
    elif not token_compiled_re.match(param_value):
        param_value = param_value.replace('\\', '\\\\').replace('"', r'\"')
        param_value = '"' + param_value + '"'
    return param_value


class MediaType(namedtuple('MediaType', ['type', 'subtype', 'params'])):
    """
    Represent a media type.

    :param type: (``str``) the top-level type, such as ``'application'``
    :param subtype: (``str``) the subtype, such as ``'json'``
    :param params: (``dict``, optional) media type parameters, mapping the
                   parameter name to its value

    ``MediaType()`` with no arguments is the zero value: it stands for an
    absent or unspecified media type, is falsy, and formats as ``''``.

    This object should not be modified. Equality and hashing are structural,
    so the order of the parameters does not matter when comparing two
    instances, and equal instances can share a ``dict`` key or ``set`` slot.
    """

    __slots__ = ()

    def __new__(cls, type='', subtype='', params=None):
        return super().__new__(cls, type, subtype, dict(params or {}))

    def __bool__(self):
        return bool(self.type or self.subtype)

    def __hash__(self):
        return hash((self.type, self.subtype, frozenset(self.params.items())))

    def __str__(self):
        """
        Return the media type in header form.

        The zero value formats as the empty string. Parameters are written in
        the order of the ``params`` dict, with no whitespace, and are quoted
        only when they are not tokens.
        """
        if not self:
            return ''
        value = self.type + '/' + self.subtype
        for name, param_value in self.params.items():
            value += ';' + name + '=' + _escape_and_quote_parameter_value(
                param_value,
            )
        return value

    @property
    def mime(self):
        """(``str``) ``type/subtype``, without parameters."""
        if not self:
            return ''
        return self.type + '/' + self.subtype

    def matches(self, other):
        """
        Return whether this media type falls within the media range `other`.

        A ``*`` type or subtype in `other` matches anything. Every parameter
        named by `other` must be present here with the same value; parameters
        that `other` does not name are ignored. Types, subtypes, parameter
        names and values are compared case-insensitively.
        """
        if other.type != '*' and other.type.lower() != self.type.lower():
            return False
        if (
            other.subtype != '*' and
            other.subtype.lower() != self.subtype.lower()
        ):
            return False
        params = {
            name.lower(): value.lower() for name, value in self.params.items()
        }
        for name, value in other.params.items():
            if params.get(name.lower()) != value.lower():
                return False
        return True

    @classmethod
    def parse(cls, value):
        """
        Parse a media type.

        :param value: (``str`` or ``None``) the media type, e.g. the value of
                      a ``Content-Type`` header
        :return: (:class:`MediaType`) the parsed media type, or the zero value
                 if `value` is ``None``, empty or only whitespace.
        :raises InvalidMediaType: if the type or subtype is missing or
                                  malformed, or anything other than parameters
                                  follows them
        :raises InvalidParameter: if a parameter is malformed

        When a parameter name is repeated, the last value wins.
        """
        if value is None or not value.strip():
            return cls()

        consumed = _consume_type(value, 0)
        if consumed is None:
            raise InvalidMediaType(value)
        type_, subtype, pos = consumed

        params = {}
        while pos < len(value) and value[pos] == ';':
            consumed = _consume_parameter(value, pos + 1)
            if consumed is None:
                raise InvalidParameter(value)
            name, param_value, pos = consumed
            params[name] = param_value

        # there must not be anything left after the parameters
        if pos < len(value):
            raise InvalidMediaType(value)

        return cls(type_, subtype, params)


def parse_media_type(value):
    """Parse `value` into a :class:`MediaType`. See :meth:`MediaType.parse`."""
    return MediaType.parse(value)


def format_media_type(media_type):
    """Return `media_type` in header form. See :meth:`MediaType.__str__`."""
    return str(media_type)


def new_media_type(value):
    """
    Parse `value`, returning the zero :class:`MediaType` if it is invalid.

    Useful for media types that are known in advance, such as the list of
    types a server can produce.
    """
    try:
        return MediaType.parse(value)
    except (InvalidMediaType, InvalidParameter):
        return MediaType()


def extract_content_type(header_value):
    """
    Return the :class:`MediaType` of a ``Content-Type`` header value.

    An absent (``None``) or empty header gives the zero value.

    :raises InvalidMediaType: see :meth:`MediaType.parse`
    :raises InvalidParameter: see :meth:`MediaType.parse`
    """
    return MediaType.parse(header_value)
