""" Parsing of AMQP connection URIs.

    There is no standard for "amqp" URIs; the various schemes in use share
    the basic idea but differ in the details. The grammar accepted here aims
    for URIs that work as widely as possible::

        amqp[s]://[user[:password]@]host[:port][/vhost]

    The scheme is ``amqp``, or ``amqps`` if TLS is required. The host, port,
    user and password live in the authority component, exactly as they do
    for http URIs. The vhost is the first and only segment of the path, with
    the leading slash removed; a vhost containing slashes or other reserved
    characters must percent-encode them::

        amqp://dev.rabbitmq.com               vhost not set, default (/) applies
        amqp://dev.rabbitmq.com/              vhost is the empty string
        amqp://dev.rabbitmq.com/%2Fvault      vhost is /vault
        amqp://dev.rabbitmq.com/production    vhost is production
        amqp://dev.rabbitmq.com/foo/bar       MultiSegmentPathError
"""

from __future__ import annotations

import dataclasses
import logging
import re
import urllib.parse
from typing import Optional

from .errors import InvalidURIError, UnsupportedSchemeError, MultiSegmentPathError


logger = logging.getLogger(__name__)

AMQP = 'amqp'
AMQPS = 'amqps'
AMQP_PORTS = {AMQP: 5672, AMQPS: 5671}

# Characters permitted anywhere in a URI (RFC 3986 unreserved, reserved,
# and the percent sign for escapes). Anything else, whitespace included,
# means the input is not a URI.

_uri_characters = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*\Z")
_bad_escape = re.compile(r'%(?![0-9A-Fa-f]{2})')


@dataclasses.dataclass(frozen=True)
class PartialSettings:
    """ The settings that could be read from a connection URI. Any field
        that is None was not present in the URI; :meth:`items` only yields
        the fields that are present, keyed the same way as
        :class:`amqsettings.ConnectionSettings`.
    """

    scheme: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    ssl: Optional[bool] = None
    vhost: Optional[str] = None


    def items(self):
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue

            key = field.name
            if key == 'password':
                key = 'pass'

            yield key, value


    def __repr__(self):
        present = list()
        for key, value in self.items():
            if key == 'pass':
                value = '***'
            present.append('%s=%r' % (key, value))

        return 'PartialSettings(' + ', '.join(present) + ')'



def parse_amqp_url(connection_string):
    """ Decode the AMQP connection URI *connection_string* and return its
        components as a :class:`PartialSettings` instance. No defaults are
        merged in, with one exception: the port is always set, falling back
        to the standard port for the scheme if the URI does not name one.

        Raises :class:`InvalidURIError` if the string is not a URI at all,
        :class:`UnsupportedSchemeError` if the scheme is not amqp or amqps,
        and :class:`MultiSegmentPathError` if the path has more than one
        segment.
    """

    uri = _split(connection_string)

    scheme = uri.scheme
    if scheme not in AMQP_PORTS:
        raise UnsupportedSchemeError('connection URI must use the amqp or amqps scheme (example: amqp://bus.megacorp.internal:5766), not ' + repr(connection_string))

    # urlsplit reports an empty netloc both for amqp:///vhost and for
    # amqp:vhost; only the former has an authority component.

    remainder = connection_string[len(scheme) + 1:]
    if remainder and not remainder.startswith('//'):
        raise InvalidURIError('connection URI has no authority component: ' + repr(connection_string))

    user = None
    password = None

    if '@' in uri.netloc:
        userinfo = uri.netloc.rpartition('@')[0]
        user, separator, password = userinfo.partition(':')
        user = _unquote(user, connection_string)

        if separator:
            password = _unquote(password, connection_string)
        else:
            password = None

    host = _host(uri.netloc)

    try:
        port = uri.port
    except ValueError:
        raise InvalidURIError('invalid port in connection URI: ' + repr(connection_string))

    if port is None:
        port = AMQP_PORTS[scheme]

    vhost = None
    path = uri.path

    if path:
        segment = path[1:]
        if '/' in segment:
            raise MultiSegmentPathError(repr(connection_string) + ' has a multiple-segment path; please percent-encode any slashes in the vhost name (e.g. /production => %2Fproduction)')

        vhost = _unquote(segment, connection_string)

    logger.debug('parsed connection URI: scheme=%s host=%s port=%s', scheme, host, port)

    return PartialSettings(scheme=scheme, user=user, password=password,
                           host=host, port=port, ssl=(scheme == AMQPS),
                           vhost=vhost)



def _split(connection_string):
    """ Syntax-check *connection_string* and split it into its components.
    """

    if not isinstance(connection_string, str):
        raise InvalidURIError('connection URI must be a string, not ' + type(connection_string).__name__)

    if _uri_characters.match(connection_string) is None:
        raise InvalidURIError('not a valid URI: ' + repr(connection_string))

    if _bad_escape.search(connection_string):
        raise InvalidURIError('malformed percent-escape in URI: ' + repr(connection_string))

    try:
        uri = urllib.parse.urlsplit(connection_string)
    except ValueError as e:
        raise InvalidURIError('not a valid URI: ' + repr(connection_string)) from e

    return uri



def _unquote(component, connection_string):
    """ Percent-decode a single URI *component*. Escapes that do not decode
        as UTF-8 make the whole URI invalid.
    """

    try:
        return urllib.parse.unquote(component, errors='strict')
    except UnicodeDecodeError as e:
        raise InvalidURIError('percent-escape is not valid UTF-8 in URI: ' + repr(connection_string)) from e



def _host(netloc):
    """ Return the host portion of the authority component, verbatim apart
        from the brackets around an IPv6 literal. Returns None if there is
        no host.
    """

    hostinfo = netloc.rpartition('@')[2]

    if hostinfo.startswith('['):
        host = hostinfo[1:hostinfo.index(']')]
    else:
        host = hostinfo.partition(':')[0]

    if host == '':
        return None

    return host


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
