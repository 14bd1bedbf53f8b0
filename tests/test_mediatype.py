import pytest

from contenttype.errors import (
    InvalidMediaType,
    InvalidParameter,
    MediaTypeError,
    )
from contenttype.mediatype import (
    MediaType,
    extract_content_type,
    format_media_type,
    new_media_type,
    parse_media_type,
    )


class TestMediaType(object):
    def test___new___defaults(self):
        media_type = MediaType()
        assert media_type.type == ''
        assert media_type.subtype == ''
        assert media_type.params == {}

    def test___new___copies_params(self):
        params = {'charset': 'utf-8'}
        media_type = MediaType('text', 'plain', params)
        params['charset'] = 'latin-1'
        assert media_type.params == {'charset': 'utf-8'}

    def test___bool__(self):
        assert not MediaType()
        assert MediaType('application', 'json')
        assert MediaType('*', '*')

    def test___eq___ignores_param_order(self):
        assert (
            MediaType('a', 'b', {'c': 'd', 'e': 'f'}) ==
            MediaType('a', 'b', {'e': 'f', 'c': 'd'})
        )
        assert MediaType('a', 'b') != MediaType('a', 'b', {'c': 'd'})
        assert MediaType() != MediaType('a', 'b')

    @pytest.mark.parametrize('media_type, expected', [
        (MediaType(), ''),
        (MediaType('application', 'json'), 'application/json'),
        (MediaType('a', 'b', {'c': 'd'}), 'a/b;c=d'),
        (MediaType('a', 'b', {'c': 'd', 'e': 'f'}), 'a/b;c=d;e=f'),
        (MediaType('a', 'b', {'c': ''}), 'a/b;c=""'),
        (MediaType('a', 'b', {'c': 'd e'}), 'a/b;c="d e"'),
        (MediaType('a', 'b', {'c': '"d\\'}), 'a/b;c="\\"d\\\\"'),
    ])
    def test___str__(self, media_type, expected):
        assert str(media_type) == expected
        assert format_media_type(media_type) == expected

    def test___hash__(self):
        first = MediaType('a', 'b', {'c': 'd', 'e': 'f'})
        second = MediaType('a', 'b', {'e': 'f', 'c': 'd'})
        assert hash(first) == hash(second)
        assert {first, second, MediaType('a', 'b')} == {
            first, MediaType('a', 'b'),
        }
        handlers = {MediaType('application', 'json'): 'json'}
        assert handlers[MediaType.parse('Application/JSON')] == 'json'
        assert hash(MediaType()) == hash(MediaType.parse(''))

    def test_mime(self):
        assert MediaType('text', 'html', {'level': '1'}).mime == 'text/html'
        assert MediaType().mime == ''

    @pytest.mark.parametrize('media_type, media_range', [
        (MediaType('a', 'b'), MediaType('a', 'b')),
        (MediaType('a', 'b'), MediaType('a', '*')),
        (MediaType('a', 'b'), MediaType('*', '*')),
        (MediaType('A', 'B'), MediaType('a', 'b')),
        (MediaType('a', 'b', {'c': 'd'}), MediaType('a', 'b')),
        (MediaType('a', 'b', {'c': 'd'}), MediaType('a', 'b', {'c': 'd'})),
        (MediaType('a', 'b', {'C': 'D'}), MediaType('a', 'b', {'c': 'd'})),
        (
            MediaType('a', 'b', {'c': 'd', 'e': 'f'}),
            MediaType('a', '*', {'e': 'f'}),
        ),
    ])
    def test_matches(self, media_type, media_range):
        assert media_type.matches(media_range)

    @pytest.mark.parametrize('media_type, media_range', [
        (MediaType('a', 'b'), MediaType('a', 'c')),
        (MediaType('a', 'b'), MediaType('c', '*')),
        (MediaType('a', 'b'), MediaType('a', 'b', {'c': 'd'})),
        (MediaType('a', 'b', {'c': 'e'}), MediaType('a', 'b', {'c': 'd'})),
    ])
    def test_matches__no_match(self, media_type, media_range):
        assert not media_type.matches(media_range)


class TestParse(object):
    @pytest.mark.parametrize('value, expected', [
        ('', MediaType()),
        ('  \t', MediaType()),
        (None, MediaType()),
        ('application/json', MediaType('application', 'json')),
        ('*/*', MediaType('*', '*')),
        ('text/*', MediaType('text', '*')),
        ('Application/JSON', MediaType('application', 'json')),
        (' application/json ', MediaType('application', 'json')),
        (
            'Application/XML;charset=utf-8',
            MediaType('application', 'xml', {'charset': 'utf-8'}),
        ),
        (
            'application/xml;foo=bar ',
            MediaType('application', 'xml', {'foo': 'bar'}),
        ),
        (
            'application/xml ; foo=bar ',
            MediaType('application', 'xml', {'foo': 'bar'}),
        ),
        (
            'application/xml;foo="bar" ',
            MediaType('application', 'xml', {'foo': 'bar'}),
        ),
        (
            'application/xml;foo="" ',
            MediaType('application', 'xml', {'foo': ''}),
        ),
        (
            'application/xml;foo="\\"b" ',
            MediaType('application', 'xml', {'foo': '"b'}),
        ),
        (
            'application/xml;foo="\\"B" ',
            MediaType('application', 'xml', {'foo': '"b'}),
        ),
        (
            'application/xml;foo="a b\\\\c"',
            MediaType('application', 'xml', {'foo': 'a b\\c'}),
        ),
        ('a/b+c;a=b;c=d', MediaType('a', 'b+c', {'a': 'b', 'c': 'd'})),
        ('a/b;A=B', MediaType('a', 'b', {'a': 'b'})),
        ('a/b;c="é"', MediaType('a', 'b', {'c': 'é'})),
        ('a/b;c="€"', MediaType('a', 'b', {'c': '€'})),
        ('a/b;c="日本"', MediaType('a', 'b', {'c': '日本'})),
        ('a/b;c="\x7f"', MediaType('a', 'b', {'c': '\x7f'})),
        ('a/b;c="\\€"', MediaType('a', 'b', {'c': '€'})),
        ('a/b;c="x y"', MediaType('a', 'b', {'c': 'x y'})),
        ('a/b;c=d;c=e', MediaType('a', 'b', {'c': 'e'})),
        ('a/b;\tc=d\t;\te=f', MediaType('a', 'b', {'c': 'd', 'e': 'f'})),
    ])
    def test_valid(self, value, expected):
        assert MediaType.parse(value) == expected
        assert parse_media_type(value) == expected

    @pytest.mark.parametrize('value, error', [
        ('Application', InvalidMediaType),
        ('/Application', InvalidMediaType),
        ('Application/', InvalidMediaType),
        ('a/b\x19', InvalidMediaType),
        ('Application/JSON/test', InvalidMediaType),
        ('a/b e', InvalidMediaType),
        ('*/b', InvalidMediaType),
        ('a/b;c=d e', InvalidMediaType),
        ('application/xml;=bar ', InvalidParameter),
        ('application/xml; =bar ', InvalidParameter),
        ('application/xml;foo= ', InvalidParameter),
        ('a/b;c=\x19', InvalidParameter),
        ('a/b;c="\x19"', InvalidParameter),
        ('a/b;c="\\\x19"', InvalidParameter),
        ('a/b;c="d', InvalidParameter),
        ('a/b;c', InvalidParameter),
        ('a/b;', InvalidParameter),
        ('a/b;c="\t"', InvalidParameter),
        ('a/b;c="x\ty"', InvalidParameter),
        ('a/b;c="\\\t"', InvalidParameter),
        ('a/b;c="x\ny"', InvalidParameter),
        ('a/b;c="\x00"', InvalidParameter),
    ])
    def test_invalid(self, value, error):
        with pytest.raises(error):
            MediaType.parse(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            MediaType.parse('a')
        with pytest.raises(MediaTypeError):
            MediaType.parse('a/b;c')

    @pytest.mark.parametrize('value', [
        'application/json',
        'a/b;c=d',
        'a/b+c;a=b;c=d',
        'text/html;charset=utf-8;level=1',
        '*/*',
    ])
    def test_format_round_trip(self, value):
        assert str(MediaType.parse(value)) == value

    def test_parse_zero_value(self):
        assert str(MediaType.parse('')) == ''
        assert MediaType.parse(str(MediaType())) == MediaType()


class TestNewMediaType(object):
    @pytest.mark.parametrize('value, expected', [
        ('', MediaType()),
        ('application/json', MediaType('application', 'json')),
        ('a/b;c=d', MediaType('a', 'b', {'c': 'd'})),
        ('/b', MediaType()),
        ('a/', MediaType()),
        ('a/b;c', MediaType()),
    ])
    def test_new_media_type(self, value, expected):
        assert new_media_type(value) == expected


class TestExtractContentType(object):
    def test_absent(self):
        assert extract_content_type(None) == MediaType()
        assert extract_content_type('') == MediaType()

    def test_present(self):
        assert extract_content_type('Text/Plain; Charset=UTF-8') == MediaType(
            'text', 'plain', {'charset': 'utf-8'},
        )

    def test_invalid(self):
        with pytest.raises(InvalidParameter):
            extract_content_type('text/plain;charset')
