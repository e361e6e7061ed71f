"""Exception types raised by the analysis engine."""

from __future__ import annotations


class RhymeLabError(Exception):
    """Base class for errors raised by :mod:`rhyme_lab`."""


class ConfigurationError(RhymeLabError, ValueError):
    """Raised when analysis options have the wrong type or an unknown name."""


__all__ = ["RhymeLabError", "ConfigurationError"]
