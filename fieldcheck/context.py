"""
Context manager for validation configuration (e.g., missing-field policy).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the missing-field policy
_require_all: ContextVar[bool] = ContextVar("require_all", default=False)


def is_require_all() -> bool:
    """Check if configured fields must be present in the data."""
    return _require_all.get()


@contextmanager
def validation_context(*, require_all: bool = False):
    """
    Context manager for validation configuration.

    Args:
        require_all: If True, a bound validator reports every configured field
                     that is missing from the data as a failed ValidatedField
                     instead of leaving it out of the result.

    Example:
        from fieldcheck import bind_validators, validation_context
        from fieldcheck.checks import Positive

        validate_person = bind_validators({"age": [Positive()]})

        # By default the missing "age" is skipped and the result is {}
        validate_person({})

        # With require_all, "age" comes back as a failed field:
        # {"age": ValidatedField(None, False, ("Required field is missing",))}
        with validation_context(require_all=True):
            validate_person({})
    """
    token = _require_all.set(require_all)
    try:
        yield
    finally:
        _require_all.reset(token)
