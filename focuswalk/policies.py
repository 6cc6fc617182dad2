"""Eligibility policy helpers for focuswalk."""

from __future__ import annotations

from typing import Any

from .protocols import ItemFilter
from .types import Verdict


def is_disabled(item: Any) -> bool:
    """Return ``True`` when the item is administratively disabled."""

    return bool(getattr(item, "disabled", False))


def is_hidden(item: Any) -> bool:
    """Return ``True`` when the item is explicitly hidden."""

    return bool(getattr(item, "hidden", False))


def disabled_filter(item: Any) -> Verdict:
    """Reject disabled items together with their subtree."""

    return Verdict.REJECT if is_disabled(item) else Verdict.ACCEPT


def hidden_filter(item: Any) -> Verdict:
    """Reject hidden items together with their subtree."""

    return Verdict.REJECT if is_hidden(item) else Verdict.ACCEPT


def default_filter(item: Any) -> Verdict:
    """Fallback policy used when a configuration carries no filter.

    Disabled or hidden items are rejected, everything else is accepted. The
    default never answers ``SKIP`` since it has no notion of wrapper items.
    """

    if is_disabled(item) or is_hidden(item):
        return Verdict.REJECT
    return Verdict.ACCEPT


def compose_filters(*filters: ItemFilter) -> ItemFilter:
    """Chain filters, returning the first verdict that is not ``ACCEPT``."""

    if not filters:
        raise ValueError("compose_filters requires at least one filter")

    def composed(item: Any) -> Verdict:
        for item_filter in filters:
            verdict = item_filter(item)
            if verdict is not Verdict.ACCEPT:
                return verdict
        return Verdict.ACCEPT

    return composed


__all__ = [
    "compose_filters",
    "default_filter",
    "disabled_filter",
    "hidden_filter",
    "is_disabled",
    "is_hidden",
]
