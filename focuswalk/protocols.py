"""Structural protocols for navigable item capabilities."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from .types import Verdict


@runtime_checkable
class NavigableItemProtocol(Protocol):
    """Minimal structure needed for parent/child traversal."""

    children: Sequence[Any]
    parent: Any


ItemFilter = Callable[[Any], Verdict]


__all__ = [
    "ItemFilter",
    "NavigableItemProtocol",
]
