"""Exception types raised by the matcher and its collaborators."""
from __future__ import annotations


class MatchingError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(MatchingError, TypeError):
    """Profile, catalog or limit passed to the engine has the wrong shape."""


class CatalogError(MatchingError):
    """A catalog source could not produce a list of postings."""


class ConfigError(MatchingError):
    """The profile file is missing or malformed."""
