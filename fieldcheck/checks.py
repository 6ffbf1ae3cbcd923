"""
Built-in checks for fieldcheck.

Provides factory functions that return Check callables. Every factory takes an
optional `message` overriding its default error text.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from .types import Check, Err, Ok, Outcome


def _or_default(message: str | None, default: str) -> str:
    return default if message is None else message


def Predicate(fn: Callable[[Any], bool], message: str | None = None) -> Check:
    """
    Create a check from an arbitrary predicate function.

    A predicate that raises counts as a failed check.

    Usage:
        Predicate(lambda x: len(x) > 8, "Must be longer than 8 characters")
        Predicate(str.isalpha, "Must be alphabetic")
    """
    msg = _or_default(message, f"Failed {getattr(fn, '__name__', 'predicate')}")

    def check(x: Any) -> Outcome:
        try:
            passed = fn(x)
        except Exception as e:
            return Err(f"{msg} ({type(e).__name__}: {e})")
        return Ok(x) if passed else Err(msg)

    return check


def IsType(t: type | tuple[type, ...], message: str | None = None) -> Check:
    """
    Validate that value is an instance of type.

    Usage:
        IsType(str)
        IsType((int, float))
    """
    name = t.__name__ if isinstance(t, type) else " or ".join(x.__name__ for x in t)
    return Predicate(
        lambda x: isinstance(x, t), _or_default(message, f"Expected {name}")
    )


def Conforms(annotation: Any, message: str | None = None) -> Check:
    """
    Validate value against a type annotation using pydantic in strict mode.

    Handles generics and unions that isinstance cannot, e.g. list[int] or
    dict[str, float] | None. Without `message`, the error is pydantic's own
    description of the first problem found.

    Usage:
        Conforms(list[int])
        Conforms(dict[str, int] | None)
    """
    adapter = TypeAdapter(annotation)

    def check(x: Any) -> Outcome:
        try:
            adapter.validate_python(x, strict=True)
        except ValidationError as e:
            if message is not None:
                return Err(message)
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"])
            return Err(f"{loc}: {first['msg']}" if loc else first["msg"])
        return Ok(x)

    return check


def InRange(
    lower: int | None = None, upper: int | None = None, message: str | None = None
) -> Check:
    """
    Validate length is within range (inclusive).

    Values without a length fail.

    Usage:
        InRange(1, 10)      # 1 to 10 items
        InRange(lower=5)    # At least 5
        InRange(upper=20)   # At most 20
    """

    def in_range(x: Any) -> bool:
        try:
            n = len(x)
        except TypeError:
            return False
        if lower is not None and n < lower:
            return False
        if upper is not None and n > upper:
            return False
        return True

    msg_parts = []
    if lower is not None:
        msg_parts.append(f">= {lower}")
    if upper is not None:
        msg_parts.append(f"<= {upper}")
    msg = _or_default(message, f"Length must be {' and '.join(msg_parts)}")

    return Predicate(in_range, msg)


def MinLength(n: int, message: str | None = None) -> Check:
    """Validate minimum length."""
    return InRange(lower=n, message=message)


def MaxLength(n: int, message: str | None = None) -> Check:
    """Validate maximum length."""
    return InRange(upper=n, message=message)


def Matches(pattern: str, message: str | None = None) -> Check:
    """
    Validate that the whole string matches a regex pattern.

    An invalid pattern does not raise here; every call of the check fails
    with a message naming the pattern instead.

    Usage:
        Matches(r"[a-z]+")
        Matches(r"\\d{3}-\\d{4}")
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        compile_error = f"Failed to compile pattern: {pattern} ({e})"

        def broken(x: Any) -> Outcome:
            return Err(compile_error)

        return broken

    msg = _or_default(message, f"Must match pattern: {pattern}")

    def check(x: Any) -> Outcome:
        if isinstance(x, str) and compiled.fullmatch(x) is not None:
            return Ok(x)
        return Err(msg)

    return check


def Alphabetic(message: str | None = None) -> Check:
    """Validate value is a non-empty string of ASCII letters."""
    return Matches(r"[A-Za-z]+", _or_default(message, "Must be an alphabetic string"))


def InSet(values: set | frozenset | list | tuple, message: str | None = None) -> Check:
    """
    Validate value is in a set of allowed values.

    Usage:
        InSet({"active", "inactive", "pending"})
        InSet([1, 2, 3])
    """
    container = frozenset(values)
    return Predicate(
        lambda x: x in container,
        _or_default(message, f"Must be one of: {sorted(map(repr, container))}"),
    )


def _compare(op: Callable[[Any], bool], message: str) -> Check:
    def check(x: Any) -> Outcome:
        try:
            passed = op(x)
        except TypeError:
            return Err(f"{message} (got {type(x).__name__})")
        return Ok(x) if passed else Err(message)

    return check


def Eq(value: Any, message: str | None = None) -> Check:
    """Validate exact equality."""
    return _compare(lambda x: x == value, _or_default(message, f"Must equal {value!r}"))


def Gt(value: Any, message: str | None = None) -> Check:
    """Validate greater than."""
    return _compare(lambda x: x > value, _or_default(message, f"Must be > {value}"))


def Gte(value: Any, message: str | None = None) -> Check:
    """Validate greater than or equal."""
    return _compare(lambda x: x >= value, _or_default(message, f"Must be >= {value}"))


def Lt(value: Any, message: str | None = None) -> Check:
    """Validate less than."""
    return _compare(lambda x: x < value, _or_default(message, f"Must be < {value}"))


def Lte(value: Any, message: str | None = None) -> Check:
    """Validate less than or equal."""
    return _compare(lambda x: x <= value, _or_default(message, f"Must be <= {value}"))


def Between(
    lower: Any, upper: Any, inclusive: bool = True, message: str | None = None
) -> Check:
    """Validate value is between bounds."""
    if inclusive:
        return _compare(
            lambda x: lower <= x <= upper,
            _or_default(message, f"Must be between {lower} and {upper}"),
        )
    return _compare(
        lambda x: lower < x < upper,
        _or_default(message, f"Must be between {lower} and {upper} (exclusive)"),
    )


def Positive(message: str | None = None) -> Check:
    """Validate value is greater than zero."""
    return Gt(0, _or_default(message, "Value must be positive"))


def IsTrue(message: str | None = None) -> Check:
    """Validate value is exactly True."""
    return Predicate(lambda x: x is True, _or_default(message, "Value must be true"))
