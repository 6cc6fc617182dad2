"""Move resolution internals: validation, classification and walkers."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Optional

from .config import NavigationConfig, resolve_config
from .errors import InvalidArgumentError, UnsupportedOperationError
from .policies import default_filter
from .protocols import ItemFilter, NavigableItemProtocol
from .types import HIERARCHICAL_DIRECTIONS, SEQUENCE_DIRECTIONS, MoveDirection, Verdict

_TEXT_TYPES = (str, bytes, bytearray)


class MoveEvent(NamedTuple):
    """Metadata describing a single resolved move."""

    direction: str
    mode: str
    found: bool
    wrapped: bool


def log_move_event(
    event: MoveEvent,
    *,
    level: int = logging.DEBUG,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log a move event using the provided (or module) logger."""

    target_logger = logger or logging.getLogger(__name__)
    target_logger.log(
        level,
        "Move %s (%s mode): found=%s, wrapped=%s",
        event.direction,
        event.mode,
        event.found,
        event.wrapped,
    )


def coerce_direction(direction: Any) -> MoveDirection:
    """Map a directive (member, integer value or name) onto ``MoveDirection``."""

    if isinstance(direction, MoveDirection):
        return direction
    if isinstance(direction, numbers.Integral) and not isinstance(direction, bool):
        try:
            return MoveDirection(int(direction))
        except ValueError:
            pass
    elif isinstance(direction, str):
        member = MoveDirection.__members__.get(direction.upper())
        if member is not None:
            return member
    raise InvalidArgumentError(f"unrecognized move directive {direction!r}")


def _is_structural(root: Any) -> bool:
    return isinstance(root, NavigableItemProtocol) and not isinstance(
        root, _TEXT_TYPES
    )


def _is_item_sequence(root: Any) -> bool:
    return isinstance(root, Sequence) and not isinstance(root, _TEXT_TYPES)


def _index_of(items: Sequence[Any], item: Any) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise InvalidArgumentError("item is not listed among its parent's children")


@dataclass(frozen=True)
class _Scope:
    """Bounded, read-only view of the caller structure for one request."""

    config: NavigationConfig
    item_filter: ItemFilter
    group: Optional[tuple[Any, ...]]
    move_logger: Optional[logging.Logger] = None

    @property
    def root(self) -> Any:
        return self.config.root

    @property
    def is_group(self) -> bool:
        return self.group is not None

    @property
    def mode(self) -> str:
        if self.is_group:
            return "group"
        return "depth-first" if self.config.depth_first else "shallow"

    def classify(self, item: Any) -> Verdict:
        verdict = self.item_filter(item)
        if not isinstance(verdict, Verdict):
            raise InvalidArgumentError(
                f"filter must return a Verdict, received {verdict!r}"
            )
        return verdict

    def children(self, item: Any) -> tuple[Any, ...]:
        if self.is_group and item is not self.root:
            return ()
        if self.is_group:
            return self.group
        return tuple(getattr(item, "children", None) or ())

    def parent(self, item: Any) -> Any:
        """Structural parent inside the bounds, ``None`` at the top level."""

        if self.is_group:
            return None
        parent = getattr(item, "parent", None)
        if parent is None or parent is self.root:
            return None
        return parent

    def top_level(self) -> tuple[Any, ...]:
        return self.children(self.root)

    def siblings(self, item: Any) -> tuple[Any, ...]:
        parent = self.parent(item)
        return self.top_level() if parent is None else self.children(parent)

    def contains(self, item: Any) -> bool:
        if item is self.root:
            return True
        if self.is_group:
            return any(member is item for member in self.group)
        seen: set[int] = set()
        node = getattr(item, "parent", None)
        while node is not None:
            if node is self.root:
                return True
            if id(node) in seen:
                raise InvalidArgumentError("parent links form a cycle")
            seen.add(id(node))
            node = getattr(node, "parent", None)
        return False

    def rejected_ancestor(self, item: Any, *, include_self: bool) -> Any:
        """Return the outermost rejected item on the bounded parent chain."""

        outermost = None
        node = item if include_self else self.parent(item)
        while node is not None:
            if self.classify(node) is Verdict.REJECT:
                outermost = node
            node = self.parent(node)
        return outermost


def build_scope(
    config: Any, *, move_logger: Optional[logging.Logger] = None
) -> _Scope:
    """Validate a configuration and bind it to a traversal scope."""

    resolved = resolve_config(config)
    root = resolved.root
    if root is None:
        raise InvalidArgumentError("configuration root required")

    structural = _is_structural(root)
    if resolved.flat is None:
        if structural:
            group = None
        elif _is_item_sequence(root):
            group = tuple(root)
        else:
            raise InvalidArgumentError(
                "configuration root must be a structural item or a sequence "
                f"of items, received {type(root).__name__}"
            )
    elif resolved.flat:
        if structural:
            group = tuple(getattr(root, "children", None) or ())
        elif _is_item_sequence(root):
            group = tuple(root)
        else:
            raise InvalidArgumentError(
                f"configuration root is not navigable: {type(root).__name__}"
            )
    else:
        if not structural:
            raise InvalidArgumentError(
                "tree mode requires a structural root exposing children and parent"
            )
        group = None

    return _Scope(
        config=resolved,
        item_filter=resolved.filter or default_filter,
        group=group,
        move_logger=move_logger,
    )


def _first_accepted(
    scope: _Scope, candidates: Sequence[Any], *, reverse: bool = False
) -> Any:
    ordered = reversed(candidates) if reverse else candidates
    for candidate in ordered:
        if scope.classify(candidate) is Verdict.ACCEPT:
            return candidate
    return None


def _level(scope: _Scope, start: Any) -> Optional[tuple[Any, ...]]:
    # Sibling sequence of start, or None when it lies beneath a pruned branch.
    if start is scope.root:
        return None
    if scope.rejected_ancestor(start, include_self=False) is not None:
        return None
    return scope.siblings(start)


def _move_first(scope: _Scope, start: Any) -> Any:
    level = _level(scope, start)
    return None if level is None else _first_accepted(scope, level)


def _move_last(scope: _Scope, start: Any) -> Any:
    level = _level(scope, start)
    return None if level is None else _first_accepted(scope, level, reverse=True)


def _children_of(scope: _Scope, start: Any) -> tuple[Any, ...]:
    if start is not scope.root and (
        scope.rejected_ancestor(start, include_self=True) is not None
    ):
        return ()
    return scope.children(start)


def _move_child(scope: _Scope, start: Any) -> Any:
    return _first_accepted(scope, _children_of(scope, start))


def _move_last_child(scope: _Scope, start: Any) -> Any:
    return _first_accepted(scope, _children_of(scope, start), reverse=True)


def _move_parent(scope: _Scope, start: Any) -> Any:
    # Parents are structurally reachable, so no filter is applied here.
    if start is scope.root:
        return None
    return scope.parent(start)


def _move_top(scope: _Scope, start: Any) -> Any:
    return _first_accepted(scope, scope.top_level())


def _move_end(scope: _Scope, start: Any) -> Any:
    return _first_accepted(scope, scope.top_level(), reverse=True)


_LEVEL_MOVES = {
    MoveDirection.FIRST: _move_first,
    MoveDirection.LAST: _move_last,
    MoveDirection.CHILD: _move_child,
    MoveDirection.LAST_CHILD: _move_last_child,
    MoveDirection.PARENT: _move_parent,
    MoveDirection.TOP: _move_top,
    MoveDirection.END: _move_end,
}


def _step_shallow(scope: _Scope, start: Any, *, forward: bool) -> tuple[Any, bool]:
    level = _level(scope, start)
    if level is None:
        return None, False
    index = _index_of(level, start)
    following = level[index + 1 :] if forward else level[:index]
    target = _first_accepted(scope, following, reverse=not forward)
    if target is None and scope.config.cycle:
        return _first_accepted(scope, level, reverse=not forward), True
    return target, False


# Pre-order cursor: one (siblings, index) frame per level, top level first.
_Frames = list[tuple[tuple[Any, ...], int]]


def _cursor(scope: _Scope, node: Any) -> _Frames:
    frames: _Frames = []
    while node is not None:
        siblings = scope.siblings(node)
        frames.append((siblings, _index_of(siblings, node)))
        node = scope.parent(node)
    frames.reverse()
    return frames


def _current(frames: _Frames) -> Any:
    siblings, index = frames[-1]
    return siblings[index]


def _advance(scope: _Scope, frames: _Frames, *, descend: bool) -> None:
    """Step the cursor to the next pre-order item; empty frames mean exhausted."""

    if descend:
        children = scope.children(_current(frames))
        if children:
            frames.append((children, 0))
            return
    while frames:
        siblings, index = frames.pop()
        if index + 1 < len(siblings):
            frames.append((siblings, index + 1))
            return


def _descend_last(scope: _Scope, frames: _Frames) -> None:
    while scope.classify(_current(frames)) is not Verdict.REJECT:
        children = scope.children(_current(frames))
        if not children:
            return
        frames.append((children, len(children) - 1))


def _retreat(scope: _Scope, frames: _Frames) -> None:
    """Step the cursor to the previous pre-order item."""

    siblings, index = frames.pop()
    if index > 0:
        frames.append((siblings, index - 1))
        _descend_last(scope, frames)


def _scan_forward(scope: _Scope, frames: _Frames) -> Any:
    while frames:
        candidate = _current(frames)
        verdict = scope.classify(candidate)
        if verdict is Verdict.ACCEPT:
            return candidate
        _advance(scope, frames, descend=verdict is not Verdict.REJECT)
    return None


def _scan_backward(scope: _Scope, frames: _Frames) -> Any:
    while frames:
        candidate = _current(frames)
        if scope.classify(candidate) is Verdict.ACCEPT:
            return candidate
        _retreat(scope, frames)
    return None


def _step_depth_first(
    scope: _Scope, start: Any, *, forward: bool
) -> tuple[Any, bool]:
    # Resume from the outermost pruned ancestor so nothing inside it is visited.
    anchor = scope.rejected_ancestor(start, include_self=True)
    frames = _cursor(scope, start if anchor is None else anchor)
    if forward:
        _advance(scope, frames, descend=anchor is None)
        target = _scan_forward(scope, frames)
    else:
        _retreat(scope, frames)
        target = _scan_backward(scope, frames)
    if target is not None or not scope.config.cycle:
        return target, False

    top = scope.top_level()
    if not top:
        return None, False
    if forward:
        return _scan_forward(scope, [(top, 0)]), True
    frames = [(top, len(top) - 1)]
    _descend_last(scope, frames)
    return _scan_backward(scope, frames), True


def _step_sequence(scope: _Scope, start: Any, *, forward: bool) -> tuple[Any, bool]:
    if start is scope.root:
        return None, False
    if scope.config.depth_first and not scope.is_group:
        return _step_depth_first(scope, start, forward=forward)
    return _step_shallow(scope, start, forward=forward)


def resolve_move(
    config: Any,
    start: Any,
    direction: Any,
    *,
    move_logger: Optional[logging.Logger] = None,
) -> Any:
    """Validate a request and return the target item, or ``None``."""

    scope = build_scope(config, move_logger=move_logger)
    if start is None or direction is None:
        return None

    move = coerce_direction(direction)
    if scope.is_group and move in HIERARCHICAL_DIRECTIONS:
        raise UnsupportedOperationError(
            f"{move.name} requires a hierarchical structure; "
            "the configured root is a flat group"
        )
    if not scope.contains(start):
        raise InvalidArgumentError("start item is not inside the configured root")

    if move in SEQUENCE_DIRECTIONS:
        target, wrapped = _step_sequence(
            scope, start, forward=move is MoveDirection.NEXT
        )
    else:
        target, wrapped = _LEVEL_MOVES[move](scope, start), False

    log_move_event(
        MoveEvent(
            direction=move.name,
            mode=scope.mode,
            found=target is not None,
            wrapped=wrapped,
        ),
        logger=scope.move_logger,
    )
    return target


def iter_focusable(config: Any) -> Iterator[Any]:
    """Yield every accepted item in pruned document order."""

    scope = build_scope(config)
    if scope.is_group:
        for member in scope.group:
            if scope.classify(member) is Verdict.ACCEPT:
                yield member
        return

    top = scope.top_level()
    frames: _Frames = [(top, 0)] if top else []
    while frames:
        candidate = _current(frames)
        verdict = scope.classify(candidate)
        if verdict is Verdict.ACCEPT:
            yield candidate
        _advance(scope, frames, descend=verdict is not Verdict.REJECT)
