"""Shared enum contracts for focuswalk."""

from __future__ import annotations

import enum


class Verdict(enum.Enum):
    """Tri-state classification of a candidate item."""

    ACCEPT = "accept"
    REJECT = "reject"
    SKIP = "skip"


class MoveDirection(enum.IntEnum):
    """Closed set of move directives understood by the navigator."""

    FIRST = 0
    LAST = 1
    NEXT = 2
    PREVIOUS = 3
    PARENT = 4
    CHILD = 5
    LAST_CHILD = 6
    TOP = 7
    END = 8


# Directives that only make sense when the structure has a hierarchy.
HIERARCHICAL_DIRECTIONS: frozenset[MoveDirection] = frozenset(
    {MoveDirection.PARENT, MoveDirection.CHILD, MoveDirection.LAST_CHILD}
)

SEQUENCE_DIRECTIONS: frozenset[MoveDirection] = frozenset(
    {MoveDirection.NEXT, MoveDirection.PREVIOUS}
)


__all__ = [
    "HIERARCHICAL_DIRECTIONS",
    "MoveDirection",
    "SEQUENCE_DIRECTIONS",
    "Verdict",
]
