import pytest

import amqsettings


@pytest.fixture
def fresh_defaults(monkeypatch):
    """ Discard the memoized default record so that a test can observe the
        first computation.
    """

    monkeypatch.setattr(amqsettings.registry, '_default', None)
    yield


@pytest.fixture
def environ():
    """ An empty environment, for exercising from_environment() without
        whatever happens to be set in the real one.
    """

    return dict()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
