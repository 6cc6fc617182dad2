"""Local dtype policy for focuswalk arena contracts."""

import numpy as np

# Keep arena index buffers consistent across focuswalk structures.
INDEX_DTYPE = np.int64

# Parent index marking a top-level node (its parent is the arena root).
NO_PARENT = -1


def as_index(x):
    """Convert a scalar/array to focuswalk index dtype."""
    return np.asarray(x, dtype=INDEX_DTYPE)


def as_flags(x, size: int):
    """Convert optional per-node flags to a boolean buffer of ``size``."""
    if x is None:
        return np.zeros((size,), dtype=bool)
    return np.asarray(x, dtype=bool)


__all__ = ["INDEX_DTYPE", "NO_PARENT", "as_flags", "as_index"]
