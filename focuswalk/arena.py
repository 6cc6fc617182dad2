"""Array-backed navigable structures addressed through index handles."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from beartype import beartype
from jaxtyping import Bool, Int, jaxtyped

from .dtypes import INDEX_DTYPE, NO_PARENT, as_flags, as_index


@jaxtyped(typechecker=beartype)
def _resolve_levels(
    parents: Int[np.ndarray, "n"],
    disabled: Bool[np.ndarray, "n"],
    hidden: Bool[np.ndarray, "n"],
) -> Int[np.ndarray, "n"]:
    """Validate parent links and return per-node depth levels.

    The flag buffers are not read here; they are part of the signature so the
    shared ``n`` dimension rejects flags misaligned with ``parents``.
    """

    num_nodes = int(parents.shape[0])
    if num_nodes == 0:
        return np.zeros((0,), dtype=INDEX_DTYPE)
    if int(parents.min()) < NO_PARENT or int(parents.max()) >= num_nodes:
        raise ValueError(
            f"parent indices must be in [{NO_PARENT}, {num_nodes}), "
            f"received range [{int(parents.min())}, {int(parents.max())}]"
        )

    parents = as_index(parents)
    levels = np.zeros((num_nodes,), dtype=INDEX_DTYPE)
    ancestor = parents.copy()
    for _ in range(num_nodes):
        live = ancestor >= 0
        if not np.any(live):
            return levels
        levels = levels + live
        ancestor = np.where(live, parents[np.where(live, ancestor, 0)], NO_PARENT)
    raise ValueError("parent links form a cycle")


def _child_buffers(parents: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return CSR-style child offsets/indices; slot ``n`` holds top-level nodes."""

    num_nodes = int(parents.shape[0])
    slots = np.where(parents >= 0, parents, num_nodes)
    counts = np.bincount(slots, minlength=num_nodes + 1)
    offsets = np.concatenate(
        [np.zeros((1,), dtype=INDEX_DTYPE), np.cumsum(counts, dtype=INDEX_DTYPE)]
    )
    order = np.argsort(slots, kind="stable")
    return offsets, as_index(order)


class ArenaNode:
    """Non-owning handle to one node of an ``ArenaTree``."""

    __slots__ = ("_arena", "index")

    def __init__(self, arena: "ArenaTree", index: int) -> None:
        self._arena = arena
        self.index = index

    @property
    def children(self) -> tuple["ArenaNode", ...]:
        return self._arena.children_of(self.index)

    @property
    def parent(self) -> Optional["ArenaNode"]:
        return self._arena.parent_of(self.index)

    @property
    def disabled(self) -> bool:
        return self.index >= 0 and bool(self._arena.disabled[self.index])

    @property
    def hidden(self) -> bool:
        return self.index >= 0 and bool(self._arena.hidden[self.index])

    @property
    def label(self) -> Optional[str]:
        return self._arena.label_of(self.index)

    @property
    def depth(self) -> int:
        if self.index < 0:
            return -1
        return int(self._arena.levels[self.index])

    def __repr__(self) -> str:
        if self.label is None:
            return f"ArenaNode({self.index})"
        return f"ArenaNode({self.index}, label={self.label!r})"


class ArenaTree:
    """Caller-held tree stored as a ``parent`` index buffer.

    Node ``i`` hangs below ``parents[i]``; ``-1`` marks top-level nodes, which
    sit directly below the synthetic ``root`` handle. Children keep index
    order. Handles are created once, so identity comparisons are stable.
    """

    def __init__(
        self,
        parents: np.ndarray,
        disabled: np.ndarray,
        hidden: np.ndarray,
        labels: Optional[tuple[str, ...]],
        levels: np.ndarray,
    ) -> None:
        self.parents = parents
        self.disabled = disabled
        self.hidden = hidden
        self.labels = labels
        self.levels = levels
        self.child_offsets, self.child_indices = _child_buffers(parents)
        self._handles = tuple(ArenaNode(self, i) for i in range(parents.shape[0]))
        self._root = ArenaNode(self, NO_PARENT)
        # Slot n holds the top level; tuples are built once and shared.
        self._child_tuples = tuple(
            tuple(
                self._handles[int(i)]
                for i in self.child_indices[
                    int(self.child_offsets[slot]) : int(self.child_offsets[slot + 1])
                ]
            )
            for slot in range(parents.shape[0] + 1)
        )

    @classmethod
    def from_parents(
        cls,
        parents,
        *,
        disabled=None,
        hidden=None,
        labels: Optional[Sequence[str]] = None,
    ) -> "ArenaTree":
        """Build an arena from parent indices and optional per-node flags."""

        parents_arr = np.asarray(parents)
        if parents_arr.size == 0:
            parents_arr = as_index(parents_arr)
        num_nodes = int(parents_arr.shape[0]) if parents_arr.ndim else 0
        disabled_arr = as_flags(disabled, num_nodes)
        hidden_arr = as_flags(hidden, num_nodes)
        levels = _resolve_levels(parents_arr, disabled_arr, hidden_arr)

        label_tuple = None
        if labels is not None:
            label_tuple = tuple(str(label) for label in labels)
            if len(label_tuple) != num_nodes:
                raise ValueError(
                    f"labels must have one entry per node ({num_nodes}), "
                    f"received {len(label_tuple)}"
                )
        return cls(
            parents=as_index(parents_arr),
            disabled=disabled_arr.copy(),
            hidden=hidden_arr.copy(),
            labels=label_tuple,
            levels=levels,
        )

    @property
    def num_nodes(self) -> int:
        return int(self.parents.shape[0])

    @property
    def root(self) -> ArenaNode:
        """Synthetic structural root bounding all top-level nodes."""

        return self._root

    def _check_index(self, index: int) -> int:
        index = int(index)
        if not 0 <= index < self.num_nodes:
            raise ValueError(
                f"node index must be in [0, {self.num_nodes}), received {index}"
            )
        return index

    def node(self, index: int) -> ArenaNode:
        return self._handles[self._check_index(index)]

    def nodes(self) -> tuple[ArenaNode, ...]:
        return self._handles

    def find(self, label: str) -> ArenaNode:
        """Return the first node carrying ``label``."""

        if self.labels is not None:
            for index, candidate in enumerate(self.labels):
                if candidate == label:
                    return self._handles[index]
        raise KeyError(label)

    def children_of(self, index: int) -> tuple[ArenaNode, ...]:
        slot = self.num_nodes if index < 0 else self._check_index(index)
        return self._child_tuples[slot]

    def parent_of(self, index: int) -> Optional[ArenaNode]:
        if index < 0:
            return None
        parent = int(self.parents[self._check_index(index)])
        return self._root if parent == NO_PARENT else self._handles[parent]

    def label_of(self, index: int) -> Optional[str]:
        if index < 0 or self.labels is None:
            return None
        return self.labels[self._check_index(index)]

    def set_disabled(self, index: int, flag: bool = True) -> None:
        self.disabled[self._check_index(index)] = bool(flag)

    def set_hidden(self, index: int, flag: bool = True) -> None:
        self.hidden[self._check_index(index)] = bool(flag)

    def node_levels(self) -> np.ndarray:
        """Return per-node depth levels (top-level nodes are level 0)."""

        return self.levels.copy()


__all__ = ["ArenaNode", "ArenaTree"]
