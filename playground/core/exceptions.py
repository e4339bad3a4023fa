"""
Playground Exceptions
=====================

Analyzers degrade gracefully on malformed input and do not raise; the
only hard failure is an unusable generator configuration.
"""


class PlaygroundError(Exception):
    """Base class for playground errors."""


class InvalidConfigurationError(PlaygroundError, ValueError):
    """Raised when generation settings cannot produce a password.

    Examples: a charset left empty after ambiguous-character exclusion,
    or a negative length.
    """
