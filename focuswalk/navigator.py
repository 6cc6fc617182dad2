"""Public navigation API for focuswalk."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from . import _navigator_impl
from .config import NavigationConfig, resolve_config
from .errors import InvalidArgumentError
from .types import SEQUENCE_DIRECTIONS, MoveDirection

MoveEvent = _navigator_impl.MoveEvent
log_move_event = _navigator_impl.log_move_event
coerce_direction = _navigator_impl.coerce_direction


def get_target(config: Any, start: Any, direction: Any) -> Any:
    """Return the item a keyboard move from ``start`` should land on.

    Parameters
    ----------
    config:
        ``NavigationConfig`` or a mapping with the same keys. Its ``root``
        bounds the traversal.
    start:
        Item currently holding focus. ``None`` is a no-op.
    direction:
        ``MoveDirection`` member, its integer value or its name. ``None`` is a
        no-op.

    Returns
    -------
    The target item, or ``None`` when there is nothing to move to.

    Raises
    ------
    InvalidArgumentError
        For a missing/malformed configuration or root, a start outside the
        root, or an unrecognized directive.
    UnsupportedOperationError
        For ``PARENT``, ``CHILD`` or ``LAST_CHILD`` on a flat group.
    """

    return _navigator_impl.resolve_move(config, start, direction)


def iter_focusable(config: Any) -> Iterator[Any]:
    """Yield all accepted items in pruned document order."""

    return _navigator_impl.iter_focusable(config)


class Navigator:
    """Navigation entry points bound to a single configuration."""

    def __init__(
        self,
        config: Any,
        *,
        move_logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config: NavigationConfig = resolve_config(config)
        self.move_logger = move_logger

    def get_target(self, start: Any, direction: Any) -> Any:
        """Resolve ``direction`` from ``start`` against the bound config."""

        return _navigator_impl.resolve_move(
            self.config, start, direction, move_logger=self.move_logger
        )

    def walk(
        self, start: Any, direction: Any = MoveDirection.NEXT
    ) -> Iterator[Any]:
        """Yield successive NEXT/PREVIOUS targets until the walk is exhausted.

        In cycle mode the walk stops once it comes back to an item it has
        already produced (or to ``start``).
        """

        move = coerce_direction(direction)
        if move not in SEQUENCE_DIRECTIONS:
            raise InvalidArgumentError(
                f"walk supports NEXT and PREVIOUS only, received {move.name}"
            )
        seen = {id(start)}
        current = start
        while True:
            current = self.get_target(current, move)
            if current is None or id(current) in seen:
                return
            seen.add(id(current))
            yield current

    def focusable_items(self) -> list[Any]:
        """Return every accepted item, e.g. to build a roving tab order."""

        return list(_navigator_impl.iter_focusable(self.config))


__all__ = [
    "MoveEvent",
    "Navigator",
    "coerce_direction",
    "get_target",
    "iter_focusable",
    "log_move_event",
]
