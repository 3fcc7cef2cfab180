"""
Shared Utilities

Small building blocks used across the subgraph package:
- MultiMap: dict of lists for grouping values under a key
- require: precondition check that raises PreconditionError
"""

from __future__ import annotations

from typing import Any, TypeVar

from .exceptions import PreconditionError

K = TypeVar("K")
V = TypeVar("V")


class MultiMap(dict[K, list[V]]):
    """
    Dictionary mapping each key to the list of values added under it.

    Keys keep first-insertion order and values keep call order.

    Usage:
        groups = MultiMap().add("Product", 1).add("Product", 2)
        groups["Product"]  # [1, 2]
    """

    def add(self, key: K, value: V) -> MultiMap[K, V]:
        """Append value to the list stored at key, creating it if absent."""
        values = self.get(key)
        if values is not None:
            values.append(value)
        else:
            self[key] = [value]
        return self


def require(condition: Any, message: str) -> None:
    """
    Raise PreconditionError with message if condition is falsy.

    Args:
        condition: Value checked for truthiness
        message: Error message used when the check fails

    Raises:
        PreconditionError: If condition is falsy
    """
    if not condition:
        raise PreconditionError(message)
