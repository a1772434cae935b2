""" Connection settings drawn from environment variables. If ``AMQP_URL``
    is set it is used on its own; otherwise the individual ``AMQP_*``
    variables listed in :data:`variables` are collected into an option map.
    Either way the result goes through :func:`amqsettings.configure`.
"""

import os

from . import resolver
from .errors import InvalidEnvironmentError


URL_VARIABLE = 'AMQP_URL'

variables = {
    'AMQP_HOST': ('host', str),
    'AMQP_PORT': ('port', int),
    'AMQP_USER': ('user', str),
    'AMQP_PASSWORD': ('pass', str),
    'AMQP_VHOST': ('vhost', str),
    'AMQP_TIMEOUT': ('timeout', float),
    'AMQP_LOGGING': ('logging', 'boolean'),
    'AMQP_SSL': ('ssl', 'boolean'),
    'AMQP_BROKER': ('broker', str),
    'AMQP_FRAME_MAX': ('frame_max', int),
}

_true = ('1', 'true', 'yes', 'on')
_false = ('0', 'false', 'no', 'off')


def from_environment(environ=None):
    """ Return the :class:`amqsettings.ConnectionSettings` described by
        *environ*, which defaults to :data:`os.environ`. Variables that are
        not set leave the corresponding default in place. A value that
        cannot be converted raises :class:`InvalidEnvironmentError`.
    """

    if environ is None:
        environ = os.environ

    url = environ.get(URL_VARIABLE)
    if url:
        return resolver.configure(resolver.ConnectionURI(url))

    options = dict()
    for variable, (key, kind) in variables.items():
        try:
            raw = environ[variable]
        except KeyError:
            continue

        options[key] = convert(variable, raw, kind)

    return resolver.configure(resolver.OptionOverrides(options))



def convert(variable, raw, kind):
    """ Convert the *raw* string value of *variable* to the given *kind*.
    """

    if kind == 'boolean':
        lowered = raw.strip().lower()
        if lowered in _true:
            return True
        if lowered in _false:
            return False

        raise InvalidEnvironmentError(variable + ' must be a boolean (true/false), not ' + repr(raw))

    if kind is str:
        return raw

    try:
        return kind(raw)
    except ValueError:
        raise InvalidEnvironmentError(variable + ' must be a number, not ' + repr(raw))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
