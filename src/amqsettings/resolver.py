""" Implementation of :func:`configure`, the principal entry point for
    turning whatever the caller has on hand into a complete
    :class:`amqsettings.ConnectionSettings` record.

    Input comes in one of three forms, each represented by its own class:
    :class:`NoSettings`, :class:`OptionOverrides`, and :class:`ConnectionURI`.
    Callers can pass one of these directly, or pass None, a mapping, or a
    string and let :func:`configure` wrap it.
"""

from __future__ import annotations

import dataclasses
import logging
import types
from collections.abc import Mapping
from typing import Any, Optional, Union

from . import registry
from . import uri
from .errors import UnknownSettingError


logger = logging.getLogger(__name__)

# Alternate spellings accepted in an option map, and the setting each one
# stands in for.

aliases = {'username': 'user', 'password': 'pass'}


@dataclasses.dataclass(frozen=True)
class NoSettings:
    """ The caller supplied nothing; the defaults apply as-is.
    """



@dataclasses.dataclass(frozen=True)
class OptionOverrides:
    """ Explicit settings keyed by name. Keys may be strings or anything
        whose :func:`str` is the setting name. The mapping is copied on
        construction and exposed read-only.
    """

    options: Mapping = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        copied = types.MappingProxyType(dict(self.options))
        object.__setattr__(self, 'options', copied)



@dataclasses.dataclass(frozen=True)
class ConnectionURI:
    """ An AMQP connection URI, see :mod:`amqsettings.uri`.
    """

    uri: str



SettingsInput = Union[NoSettings, OptionOverrides, ConnectionURI]


def classify(settings):
    """ Wrap raw *settings* in the matching input class. None becomes
        :class:`NoSettings`, a mapping becomes :class:`OptionOverrides`, and
        a string becomes :class:`ConnectionURI`. Instances of those classes
        are returned unchanged. Anything else raises :class:`TypeError`.
    """

    if isinstance(settings, (NoSettings, OptionOverrides, ConnectionURI)):
        return settings

    if settings is None:
        return NoSettings()

    if isinstance(settings, Mapping):
        return OptionOverrides(settings)

    if isinstance(settings, str):
        return ConnectionURI(settings)

    raise TypeError('connection settings must be None, a mapping, or a URI string, not ' + type(settings).__name__)



def configure(settings: Optional[Any] = None) -> registry.ConnectionSettings:
    """ Merge the supplied *settings* over the defaults and return the
        resulting :class:`amqsettings.ConnectionSettings`.

        With no *settings* the default record is returned. A mapping
        overrides the default for every key it contains; ``username`` and
        ``password`` are accepted as aliases for ``user`` and ``pass``, but
        an explicit ``user`` or ``pass`` takes precedence. A string is parsed
        as a connection URI with :func:`amqsettings.parse_amqp_url`, and the
        fields found in it override the defaults; any parse error propagates
        to the caller.

        The caller's mapping is never modified, and the returned record is
        immutable.
    """

    settings = classify(settings)

    if isinstance(settings, NoSettings):
        logger.debug('no connection settings supplied, using defaults')
        return registry.defaults()

    if isinstance(settings, OptionOverrides):
        logger.debug('resolving connection settings from an option map')
        overrides = normalize(settings.options)
        return merge(overrides)

    # classify() leaves a ConnectionURI as the only remaining possibility.

    logger.debug('resolving connection settings from a URI')
    partial = uri.parse_amqp_url(settings.uri)

    # The scheme has already done its job by determining ssl and the
    # default port; it is not a setting in its own right.

    fields = [(key, value) for key, value in partial.items() if key != 'scheme']
    return merge(fields)



def normalize(options):
    """ Return a new dictionary with the contents of the *options* mapping,
        keys converted to strings and aliases resolved. An alias with a
        value other than None supplies its setting if the canonical key is
        absent or None; the alias key itself never survives normalization.
    """

    normalized = dict()
    for key, value in options.items():
        normalized[str(key)] = value

    for alias, key in aliases.items():
        try:
            value = normalized.pop(alias)
        except KeyError:
            continue

        if value is None:
            continue

        if normalized.get(key) is None:
            normalized[key] = value

    return normalized



def merge(overrides):
    """ Apply *overrides*, a mapping or an iterable of (key, value) pairs,
        to the default settings and return the new record. Every key must
        name a known setting.
    """

    if isinstance(overrides, Mapping):
        overrides = overrides.items()

    changes = dict()
    for key, value in overrides:
        if key not in registry.keys:
            raise UnknownSettingError('unknown connection setting: ' + repr(key))

        changes[registry.attribute(key)] = value

    return registry.defaults().replace(**changes)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
