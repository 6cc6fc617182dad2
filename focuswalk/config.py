"""Navigation configuration contracts for focuswalk."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidArgumentError
from .protocols import ItemFilter

# Camel-case spellings accepted from mapping configs.
_FIELD_ALIASES: dict[str, str] = {"depthFirst": "depth_first"}


@dataclass(frozen=True)
class NavigationConfig:
    """Resolved options for a single navigation request.

    ``root`` bounds the traversal: either a structural item (tree mode) or an
    ordered sequence of items (group mode). ``flat`` forces group mode over a
    structural root's direct children; ``None`` infers the mode from ``root``.
    """

    root: Any = None
    cycle: bool = False
    depth_first: bool = False
    filter: Optional[ItemFilter] = None
    flat: Optional[bool] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "NavigationConfig":
        """Build a config from a plain mapping of option names."""

        known = {field.name for field in dataclasses.fields(cls)}
        resolved: dict[str, Any] = {}
        for key, value in options.items():
            name = _FIELD_ALIASES.get(key, key)
            if name not in known:
                supported = ", ".join(f"'{field}'" for field in sorted(known))
                raise InvalidArgumentError(
                    f"Unsupported configuration key '{key}'. Supported: ({supported})"
                )
            resolved[name] = value
        for flag in ("cycle", "depth_first"):
            if flag in resolved:
                resolved[flag] = bool(resolved[flag])
        return cls(**resolved)

    def replace(self, **changes: Any) -> "NavigationConfig":
        """Return a copy with selected fields replaced."""

        return dataclasses.replace(self, **changes)


def resolve_config(config: Any) -> NavigationConfig:
    """Normalize a config instance or mapping into ``NavigationConfig``."""

    if config is None:
        raise InvalidArgumentError("configuration required")
    if isinstance(config, NavigationConfig):
        return config
    if isinstance(config, Mapping):
        return NavigationConfig.from_mapping(config)
    raise InvalidArgumentError(
        "configuration must be a NavigationConfig or a mapping, "
        f"received {type(config).__name__}"
    )


__all__ = ["NavigationConfig", "resolve_config"]
