import logging
from wsgiref.util import setup_testing_defaults

import pytest

log = logging.getLogger(__name__)


@pytest.fixture
def make_environ():
    def _make_environ(**headers):
        environ = {}
        setup_testing_defaults(environ)
        for name, value in headers.items():
            environ[name] = value
        log.debug("test environ headers: %r", headers)
        return environ
    return _make_environ
