"""Translation of resolved settings into RabbitMQ client parameters."""

from __future__ import annotations

import logging
import ssl
from typing import Optional

import pika

from .registry import ConnectionSettings, defaults


logger = logging.getLogger(__name__)

HEARTBEAT = 600


def connection_parameters(settings: Optional[ConnectionSettings] = None) -> pika.ConnectionParameters:
    """Return the :class:`pika.ConnectionParameters` matching *settings*, or
    the defaults if no settings are given. Nothing is opened here; the
    parameters are handed to a pika connection by the caller."""

    if settings is None:
        settings = defaults()

    arguments = dict(
        host=settings.host,
        port=settings.port,
        virtual_host=settings.vhost,
        credentials=pika.PlainCredentials(settings.user, settings.password),
        frame_max=settings.frame_max,
        heartbeat=HEARTBEAT,
    )

    if settings.timeout is not None:
        arguments['socket_timeout'] = settings.timeout
        arguments['blocked_connection_timeout'] = settings.timeout

    if settings.ssl:
        context = ssl.create_default_context()
        arguments['ssl_options'] = pika.SSLOptions(context, settings.host)

    logger.debug(
        "connection parameters for %s:%s (ssl=%s)",
        settings.host, settings.port, settings.ssl,
    )

    return pika.ConnectionParameters(**arguments)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
