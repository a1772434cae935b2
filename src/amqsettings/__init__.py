""" Resolution of AMQP connection settings. Callers hand :func:`configure`
    nothing, an option map, or a connection URI, and receive a complete,
    immutable :class:`ConnectionSettings` record ready for the network layer.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Building blocks.

from . import errors
from .errors import (
    SettingsError,
    URIError,
    InvalidURIError,
    UnsupportedSchemeError,
    MultiSegmentPathError,
    UnknownSettingError,
    InvalidEnvironmentError,
)

from . import registry
from .registry import ConnectionSettings, DEFAULT_PORT, DEFAULT_FRAME_MAX
defaults = registry.defaults

from . import uri
from .uri import PartialSettings, AMQP_PORTS, AMQPS
parse_amqp_url = uri.parse_amqp_url

# Primary public-facing interfaces.

from . import resolver
from .resolver import NoSettings, OptionOverrides, ConnectionURI
configure = resolver.configure

from . import environment
from_environment = environment.from_environment

from . import transport
connection_parameters = transport.connection_parameters

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
