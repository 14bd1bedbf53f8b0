"""
Helpers for reading headers out of a WSGI environment.
"""

# PEP 3333 stores this one without the HTTP_ prefix
key2header = {
    'CONTENT_TYPE': 'Content-Type',
}

header2key = dict((v.upper(), k) for (k, v) in key2header.items())


def header_to_key(name):
    """
    Return the WSGI environ key for the header `name`.

        >>> header_to_key('Accept')
        'HTTP_ACCEPT'
        >>> header_to_key('content-type')
        'CONTENT_TYPE'
    """
    name = name.upper()
    if name in header2key:
        return header2key[name]
    return 'HTTP_' + name.replace('-', '_')


def environ_header(environ, name):
    """Return the value of header `name` in `environ`, or ``None``."""
    return environ.get(header_to_key(name))
