"""
Type definitions for fieldcheck.

Provides a minimal Result type (Ok/Err), the Check alias and ValidatedField.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Check passed."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Check failed, carrying the reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ValidatedField(Generic[T]):
    """
    Outcome of running a check sequence against one value.

    `is_valid` is True exactly when `errors` is empty.
    """

    value: T
    is_valid: bool = True
    errors: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # errors is always stored as a tuple
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.is_valid != (len(self.errors) == 0):
            raise ValueError(
                f"Inconsistent ValidatedField: is_valid={self.is_valid} "
                f"with {len(self.errors)} error(s)"
            )


# Type aliases
Outcome = Ok[Any] | Err[str]
Check = Callable[[Any], Outcome]
Checks = Sequence[Check]
