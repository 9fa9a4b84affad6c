"""
Exception classes for Liturgica.

Tree building failures are fatal to a single build call and are raised as
ConfigError subclasses. Prayer loading failures are raised as LoadError.
Structural validation never raises: its findings are returned as
ValidationError records (see liturgica.models.prayer).
"""

from typing import Optional


class LiturgicaError(Exception):
    """Base class for all Liturgica errors."""


class ConfigError(LiturgicaError):
    """
    Raised when a tree configuration cannot be turned into a navigation tree.

    Covers unknown pattern types as well as configuration files that are
    missing or unparsable.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """The tree configuration file does not exist."""


class ConfigParseError(ConfigError):
    """The tree configuration is not valid JSON or has the wrong shape."""


class LoadError(LiturgicaError):
    """
    Raised when a persisted prayer document cannot be loaded.

    Callers keep whatever prayer they already hold in memory when this is
    raised.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)
