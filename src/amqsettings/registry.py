""" The canonical :class:`ConnectionSettings` record, and the process-wide
    default instance of it returned by :func:`defaults`.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Optional


# This is the port assigned to AMQP 0-9-1 by IANA. Secure connections use
# a different port, see amqsettings.uri.AMQP_PORTS.

DEFAULT_PORT = 5672
DEFAULT_FRAME_MAX = 131072

# 'pass' is the name used everywhere a setting is addressed by key; it cannot
# be an attribute name, hence the translation.

_attribute_names = {'pass': 'password'}

keys = ('host', 'port', 'user', 'pass', 'vhost',
        'timeout', 'logging', 'ssl', 'broker', 'frame_max')


def attribute(key):
    """ Return the attribute name on :class:`ConnectionSettings` for the
        setting identified by *key*.
    """

    return _attribute_names.get(key, key)


@dataclasses.dataclass(frozen=True)
class ConnectionSettings:
    """ Immutable connection parameters for a single broker session.

        Settings can be read as attributes or by key; the key for the
        password is ``'pass'``, the attribute is :attr:`password`.
        Use :meth:`replace` to derive a modified copy.

        :ivar timeout: Connection timeout in seconds, or None for no timeout.
        :ivar broker: Identifier for broker-specific extensions, opaque here.
        :ivar frame_max: The largest frame size the client will accept.
    """

    host: str = '127.0.0.1'
    port: int = DEFAULT_PORT
    user: str = 'guest'
    password: str = 'guest'
    vhost: str = '/'
    timeout: Optional[float] = None
    logging: bool = False
    ssl: bool = False
    broker: Optional[str] = None
    frame_max: int = DEFAULT_FRAME_MAX


    def __getitem__(self, key):

        if key in keys:
            return getattr(self, attribute(key))

        raise KeyError('unknown setting: ' + str(key))


    def __repr__(self):

        # Keep credentials out of tracebacks and log output.

        fields = list()
        for key in keys:
            value = self[key]
            if key == 'pass':
                value = '***'
            fields.append('%s=%r' % (key, value))

        return 'ConnectionSettings(' + ', '.join(fields) + ')'


    def as_dict(self):
        """ Return a new dictionary of every setting, keyed by setting name.
            Changing the dictionary has no effect on this record.
        """

        settings = dict()
        for key in keys:
            settings[key] = self[key]

        return settings


    def replace(self, **overrides):
        """ Return a new :class:`ConnectionSettings` with the *overrides*
            applied. Overrides are keyed by attribute name, so the password
            is set with ``password=``.
        """

        return dataclasses.replace(self, **overrides)



_default = None
_default_lock = threading.Lock()


def defaults():
    """ Return the default :class:`ConnectionSettings`. The record is built
        once per process; every call, from any thread, receives the same
        instance.
    """

    global _default

    if _default is not None:
        return _default

    with _default_lock:
        if _default is None:
            _default = ConnectionSettings()

    return _default


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
