"""
fieldcheck - per-field validation with collected errors, plus mapping helpers.

Usage:
    from fieldcheck import bind_validators, is_valid_record
    from fieldcheck.checks import Alphabetic, MinLength, Positive

    validate_person = bind_validators({
        "name": [MinLength(9), Alphabetic()],
        "age": [Positive()],
    })

    results = validate_person({"name": "helloWorld", "age": 30})
    is_valid_record(results)  # True
"""

from .context import validation_context
from .core import (
    apply_validators,
    bind_validators,
    collect_errors,
    is_valid_record,
)
from .mapping import every, filter_values, map_values, reduce_values, some
from .types import Check, Err, Ok, ValidatedField

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Check",
    "ValidatedField",
    # Core
    "apply_validators",
    "bind_validators",
    "is_valid_record",
    "collect_errors",
    "validation_context",
    # Mapping helpers
    "map_values",
    "every",
    "some",
    "filter_values",
    "reduce_values",
]
