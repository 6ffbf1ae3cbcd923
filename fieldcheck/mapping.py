"""
Higher-order helpers over key-value mappings.

None of these rely on iteration order, and none mutate their input.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Callable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")


def map_values(data: Mapping[K, V], fn: Callable[[V], R]) -> dict[K, R]:
    """
    Return a new dict with the same keys and each value replaced by fn(value).

    Usage:
        map_values({"a": "test", "b": "example"}, str.upper)
        # {"a": "TEST", "b": "EXAMPLE"}
    """
    return {key: fn(value) for key, value in data.items()}


def every(data: Mapping[K, V], fn: Callable[[V], bool]) -> bool:
    """True if fn holds for every value. Vacuously True for an empty mapping."""
    return all(fn(value) for value in data.values())


def some(data: Mapping[K, V], fn: Callable[[V], bool]) -> bool:
    """True if fn holds for at least one value. False for an empty mapping."""
    return any(fn(value) for value in data.values())


def filter_values(data: Mapping[K, V], fn: Callable[[V], bool]) -> dict[K, V]:
    """Return a new dict holding only the entries whose value satisfies fn."""
    return {key: value for key, value in data.items() if fn(value)}


def reduce_values(data: Mapping[K, V], fn: Callable[[R, V], R], initial: R) -> R:
    """
    Fold fn(accumulator, value) over all values, starting from initial.

    Mapping order is not part of the contract, so fn should give the same
    result regardless of the order values arrive in.

    Usage:
        reduce_values({"a": 1, "b": 2}, lambda acc, v: acc + v, 0)  # 3
    """
    acc = initial
    for value in data.values():
        acc = fn(acc, value)
    return acc
