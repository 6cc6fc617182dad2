"""focuswalk: keyboard-navigation target resolution for composite widgets."""

from .arena import ArenaNode, ArenaTree
from .config import NavigationConfig, resolve_config
from .dtypes import INDEX_DTYPE, NO_PARENT, as_index
from .errors import (
    InvalidArgumentError,
    NavigationError,
    UnsupportedOperationError,
)
from .keymap import KeyBindings, direction_for_key
from .navigator import (
    MoveEvent,
    Navigator,
    coerce_direction,
    get_target,
    iter_focusable,
    log_move_event,
)
from .policies import (
    compose_filters,
    default_filter,
    disabled_filter,
    hidden_filter,
)
from .protocols import ItemFilter, NavigableItemProtocol
from .types import MoveDirection, Verdict

# Short alias matching the directive table name used by widget code.
MOVE_TO = MoveDirection

__all__ = [
    "ArenaNode",
    "ArenaTree",
    "INDEX_DTYPE",
    "InvalidArgumentError",
    "ItemFilter",
    "KeyBindings",
    "MOVE_TO",
    "MoveDirection",
    "MoveEvent",
    "NO_PARENT",
    "NavigableItemProtocol",
    "NavigationConfig",
    "NavigationError",
    "Navigator",
    "UnsupportedOperationError",
    "Verdict",
    "as_index",
    "coerce_direction",
    "compose_filters",
    "default_filter",
    "direction_for_key",
    "disabled_filter",
    "get_target",
    "hidden_filter",
    "iter_focusable",
    "log_move_event",
    "resolve_config",
]
