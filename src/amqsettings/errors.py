"""Exceptions raised while resolving connection settings.

All of them derive from :class:`ValueError`, so callers that only care about
"bad input" can catch that and move on.
"""


class SettingsError(ValueError):
    """Base class for all settings resolution errors."""


class URIError(SettingsError):
    """A connection URI could not be decoded."""


class InvalidURIError(URIError):
    """The input string is not a syntactically valid URI."""


class UnsupportedSchemeError(URIError):
    """The URI scheme is neither amqp nor amqps."""


class MultiSegmentPathError(URIError):
    """The URI path holds more than one segment."""


class UnknownSettingError(SettingsError):
    """An option map supplied a key with no counterpart in the record."""


class InvalidEnvironmentError(SettingsError):
    """An environment variable could not be converted to its setting."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
