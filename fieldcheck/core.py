"""
Core validation functions for fieldcheck.

apply_validators runs a check sequence against one value; bind_validators
turns a per-field check configuration into a reusable record validator.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from .context import is_require_all
from .mapping import every, filter_values, map_values
from .types import Checks, Err, Ok, ValidatedField

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE = "Required field is missing"


def _run_check(check: Callable, value: Any) -> str | None:
    """Run one check; return its error message, or None if it passed."""
    try:
        outcome = check(value)
    except Exception as e:
        logger.warning("Check %r raised %s", check, type(e).__name__, exc_info=True)
        return f"Validation error: {e}"

    if isinstance(outcome, (Ok, Err)):
        return None if outcome.is_ok() else str(outcome.error)
    return f"Check returned {type(outcome).__name__}, expected Ok or Err"


def apply_validators(checks: Checks, value: Any) -> ValidatedField[Any]:
    """
    Run every check against value and collect the failures.

    All checks run, even after a failure. Error messages keep the order the
    checks were declared in.

    Returns:
        ValidatedField(value, is_valid, errors)

    Usage:
        apply_validators([MinLength(9), Alphabetic()], "hell")
        # ValidatedField("hell", False, ("Length must be >= 9",))
    """
    errors: list[str] = []
    for check in checks:
        error = _run_check(check, value)
        if error is not None:
            errors.append(error)

    return ValidatedField(value=value, is_valid=not errors, errors=tuple(errors))


def bind_validators(
    checks_by_field: Mapping[Any, Checks],
) -> Callable[[Mapping[Any, Any]], dict[Any, ValidatedField[Any]]]:
    """
    Bind per-field check sequences into a record validator.

    The configuration is copied, so later changes to checks_by_field do not
    affect the returned function.

    Args:
        checks_by_field: Field key -> ordered checks for that field

    Returns:
        A function taking a field key -> value mapping and returning a
        field key -> ValidatedField mapping. Only fields that are both
        configured and present in the data appear, unless
        validation_context(require_all=True) is active, in which case
        configured-but-missing fields come back as failures.

    Raises:
        TypeError: If checks_by_field is not a mapping

    Usage:
        validate_person = bind_validators({"age": [Positive()]})
        validate_person({"age": 30})
        # {"age": ValidatedField(30, True, ())}
    """
    if not isinstance(checks_by_field, Mapping):
        raise TypeError(
            "Expected a mapping of field -> checks, "
            f"got {type(checks_by_field).__name__}"
        )

    bound: dict[Any, tuple[Callable, ...]] = {}
    for key, checks in checks_by_field.items():
        if isinstance(checks, (str, bytes)) or not isinstance(checks, Sequence):
            # A lone check (or anything else) is treated as a one-item sequence
            checks = (checks,)
        bound[key] = tuple(checks)

    logger.debug("Bound validators for %d field(s)", len(bound))

    def validate_fields(data: Mapping[Any, Any]) -> dict[Any, ValidatedField[Any]]:
        require_all = is_require_all()
        results: dict[Any, ValidatedField[Any]] = {}

        for key, checks in bound.items():
            if key in data:
                results[key] = apply_validators(checks, data[key])
            elif require_all:
                results[key] = ValidatedField(
                    value=None, is_valid=False, errors=(MISSING_FIELD_MESSAGE,)
                )

        logger.debug(
            "Validated %d of %d configured field(s)", len(results), len(bound)
        )
        return results

    return validate_fields


def is_valid_record(results: Mapping[Any, ValidatedField[Any]]) -> bool:
    """True if every field result is valid."""
    return every(results, lambda f: f.is_valid)


def collect_errors(
    results: Mapping[Any, ValidatedField[Any]],
) -> dict[Any, tuple[str, ...]]:
    """Field key -> error messages, for invalid fields only."""
    invalid = filter_values(results, lambda f: not f.is_valid)
    return map_values(invalid, lambda f: f.errors)
