"""Exception taxonomy for focuswalk navigation requests."""

from __future__ import annotations


class NavigationError(Exception):
    """Base class for errors raised while resolving a move."""


class InvalidArgumentError(NavigationError, TypeError, ValueError):
    """Raised for a missing or malformed configuration, root, start or directive."""


class UnsupportedOperationError(NavigationError, ValueError):
    """Raised when a hierarchical directive is requested on a flat group."""


__all__ = [
    "InvalidArgumentError",
    "NavigationError",
    "UnsupportedOperationError",
]
