"""Longest common prefix of a set of strings."""

from __future__ import annotations

from collections.abc import Iterable


def common_prefix(strings: Iterable[str]) -> str:
    """The longest string that begins every one of the given strings."""
    items = list(strings)
    if not items:
        raise ValueError("common_prefix needs at least one string")
    shortest = min(items, key=len)
    for position, char in enumerate(shortest):
        if any(item[position] != char for item in items):
            return shortest[:position]
    return shortest