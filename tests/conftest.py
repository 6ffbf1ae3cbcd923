import pytest

from fieldcheck import Err, Ok
from fieldcheck.checks import Alphabetic, Positive


def validate_length(v: str):
    if len(v) > 8:
        return Ok(v)
    return Err("Must be longer than 8 characters")


@pytest.fixture
def name_checks():
    return [validate_length, Alphabetic()]


@pytest.fixture
def age_checks():
    return [Positive()]
