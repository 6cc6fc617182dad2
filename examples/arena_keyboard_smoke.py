"""Smoke test replaying key presses over a random arena tree.

Run from the repository root:
    python examples/arena_keyboard_smoke.py --n-nodes 40 --seed 3
"""

from __future__ import annotations

import argparse
import logging

import numpy as np

from focuswalk import (
    ArenaTree,
    KeyBindings,
    MoveDirection,
    NavigationConfig,
    Navigator,
    direction_for_key,
)

KEYS = ("ArrowDown", "ArrowUp", "ArrowRight", "ArrowLeft", "Home", "End")


def _random_parents(n: int, seed: int) -> np.ndarray:
    """Parent links where node ``i`` hangs below an earlier node or the root."""
    rng = np.random.default_rng(seed)
    parents = np.full((n,), -1, dtype=np.int64)
    for i in range(1, n):
        parents[i] = rng.integers(-1, i)
    return parents


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--n-nodes", type=int, default=32)
    parser.add_argument("--n-presses", type=int, default=25)
    parser.add_argument("--disabled-fraction", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--cycle", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    rng = np.random.default_rng(args.seed)
    arena = ArenaTree.from_parents(
        _random_parents(args.n_nodes, args.seed),
        disabled=rng.random(args.n_nodes) < args.disabled_fraction,
        labels=[f"node{i}" for i in range(args.n_nodes)],
    )
    navigator = Navigator(
        NavigationConfig(root=arena.root, cycle=args.cycle, depth_first=True)
    )
    bindings = KeyBindings(
        hierarchical=True, home=MoveDirection.TOP, end=MoveDirection.END
    )

    print("config:", vars(args))
    print("levels:", int(arena.node_levels().max()) + 1)
    print("focusable:", len(navigator.focusable_items()))

    current = navigator.get_target(arena.root, MoveDirection.CHILD)
    if current is None:
        print("nothing to focus")
        return
    for key in rng.choice(KEYS, size=args.n_presses):
        direction = direction_for_key(str(key), bindings)
        target = navigator.get_target(current, direction)
        print(f"{key:>10}: {current.label} -> {target.label if target else '-'}")
        if target is not None:
            current = target


if __name__ == "__main__":
    main()
