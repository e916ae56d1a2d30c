"""Alias resolution.

A pure lookup: unknown names pass through unchanged and are rejected (or
rather, silently dropped) later by the binder.
"""

from __future__ import annotations

from collections.abc import Mapping


def resolve(name: str, alias_table: Mapping[str, str]) -> str:
    """Return the canonical name for *name*, or *name* itself if unmapped."""
    return alias_table.get(name, name)
