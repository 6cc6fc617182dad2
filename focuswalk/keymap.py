"""Key-name to move-directive bindings for composite widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .types import MoveDirection

Orientation = Literal["vertical", "horizontal", "both"]

ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
HOME = "Home"
END = "End"

_ORIENTATIONS: tuple[str, ...] = ("vertical", "horizontal", "both")

_SEQUENCE_KEYS: dict[str, dict[str, MoveDirection]] = {
    "vertical": {
        ARROW_DOWN: MoveDirection.NEXT,
        ARROW_UP: MoveDirection.PREVIOUS,
    },
    "horizontal": {
        ARROW_RIGHT: MoveDirection.NEXT,
        ARROW_LEFT: MoveDirection.PREVIOUS,
    },
    "both": {
        ARROW_DOWN: MoveDirection.NEXT,
        ARROW_RIGHT: MoveDirection.NEXT,
        ARROW_UP: MoveDirection.PREVIOUS,
        ARROW_LEFT: MoveDirection.PREVIOUS,
    },
}

# Tree widgets open/close levels with the arrows across the reading axis.
_HIERARCHY_KEYS: dict[str, MoveDirection] = {
    ARROW_RIGHT: MoveDirection.CHILD,
    ARROW_LEFT: MoveDirection.PARENT,
}


@dataclass(frozen=True)
class KeyBindings:
    """Resolved key bindings for one composite widget.

    Radio groups and menus usually keep the defaults; trees set
    ``hierarchical=True`` and often bind ``home``/``end`` to ``TOP``/``END``.
    """

    orientation: Orientation = "vertical"
    hierarchical: bool = False
    home: MoveDirection = MoveDirection.FIRST
    end: MoveDirection = MoveDirection.LAST

    def __post_init__(self) -> None:
        if self.orientation not in _ORIENTATIONS:
            supported = ", ".join(f"'{name}'" for name in _ORIENTATIONS)
            raise ValueError(
                f"Unsupported orientation '{self.orientation}'. Supported: ({supported})"
            )
        if self.hierarchical and self.orientation != "vertical":
            raise ValueError("hierarchical bindings require vertical orientation")

    def mapping(self) -> dict[str, MoveDirection]:
        """Return the full key-name to directive table."""

        table = dict(_SEQUENCE_KEYS[self.orientation])
        if self.hierarchical:
            table.update(_HIERARCHY_KEYS)
        table[HOME] = self.home
        table[END] = self.end
        return table


def direction_for_key(
    key: str, bindings: Optional[KeyBindings] = None
) -> Optional[MoveDirection]:
    """Return the directive bound to ``key``, or ``None`` when unbound."""

    return (bindings or KeyBindings()).mapping().get(key)


__all__ = [
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "ARROW_UP",
    "END",
    "HOME",
    "KeyBindings",
    "Orientation",
    "direction_for_key",
]
