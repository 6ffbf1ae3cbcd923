"""
Tests for fieldcheck.checks.
"""

from fieldcheck import Err, Ok
from fieldcheck.checks import (
    Alphabetic,
    Between,
    Conforms,
    Eq,
    Gt,
    Gte,
    InRange,
    InSet,
    IsTrue,
    IsType,
    Lt,
    Lte,
    Matches,
    MaxLength,
    MinLength,
    Positive,
    Predicate,
)


class TestPredicate:
    def test_pass_and_fail(self):
        check = Predicate(lambda x: x > 0, "Must be positive")
        assert check(5) == Ok(5)
        assert check(-5) == Err("Must be positive")

    def test_raising_predicate_fails(self):
        check = Predicate(lambda x: x > 0, "Must be positive")
        result = check("text")
        assert isinstance(result, Err)
        assert result.error.startswith("Must be positive (TypeError")

    def test_default_message_uses_function_name(self):
        assert Predicate(str.isalpha)("123") == Err("Failed isalpha")


class TestTypeChecks:
    def test_istype(self):
        check = IsType(int)
        assert isinstance(check(42), Ok)
        assert check("42") == Err("Expected int")

    def test_istype_tuple(self):
        check = IsType((int, float))
        assert isinstance(check(1.5), Ok)
        assert check("1.5") == Err("Expected int or float")

    def test_conforms_generic(self):
        check = Conforms(list[int])
        assert check([1, 2, 3]) == Ok([1, 2, 3])
        result = check([1, "2"])
        assert isinstance(result, Err)
        assert result.error.startswith("1: ")

    def test_conforms_strict(self):
        assert isinstance(Conforms(int)("5"), Err)

    def test_conforms_optional(self):
        check = Conforms(dict[str, int] | None)
        assert isinstance(check(None), Ok)
        assert isinstance(check({"a": 1}), Ok)
        assert isinstance(check({"a": "b"}), Err)

    def test_conforms_custom_message(self):
        assert Conforms(str, "Need text")(3) == Err("Need text")


class TestLengthChecks:
    def test_inrange(self):
        check = InRange(1, 5)
        assert isinstance(check([1, 2, 3]), Ok)
        assert check([]) == Err("Length must be >= 1 and <= 5")
        assert isinstance(check([1, 2, 3, 4, 5, 6]), Err)

    def test_unsized_fails(self):
        assert isinstance(MinLength(1)(42), Err)

    def test_min_max(self):
        assert isinstance(MinLength(9)("helloWorld"), Ok)
        assert MinLength(9)("hell") == Err("Length must be >= 9")
        assert MaxLength(3)("abcd") == Err("Length must be <= 3")


class TestPatternChecks:
    def test_matches_whole_string(self):
        check = Matches(r"[a-z]+")
        assert isinstance(check("hello"), Ok)
        assert isinstance(check("hello1"), Err)
        assert isinstance(check(123), Err)

    def test_bad_pattern_fails_instead_of_raising(self):
        check = Matches(r"[a-z")
        result = check("abc")
        assert isinstance(result, Err)
        assert result.error.startswith("Failed to compile pattern: [a-z")

    def test_alphabetic(self):
        check = Alphabetic()
        assert isinstance(check("helloWorld"), Ok)
        assert check("hellowor8d") == Err("Must be an alphabetic string")
        assert isinstance(check(""), Err)


class TestValueChecks:
    def test_inset(self):
        check = InSet({"a", "b", "c"})
        assert isinstance(check("a"), Ok)
        assert isinstance(check("d"), Err)
        assert isinstance(check(["unhashable"]), Err)

    def test_comparisons(self):
        assert isinstance(Gt(5)(6), Ok)
        assert isinstance(Gt(5)(5), Err)
        assert isinstance(Gte(5)(5), Ok)
        assert isinstance(Lt(5)(4), Ok)
        assert isinstance(Lt(5)(5), Err)
        assert isinstance(Lte(5)(5), Ok)
        assert isinstance(Eq("x")("x"), Ok)
        assert Eq("x")("y") == Err("Must equal 'x'")

    def test_incomparable_fails(self):
        assert Gt(5)("a") == Err("Must be > 5 (got str)")

    def test_between(self):
        check = Between(0, 10)
        assert isinstance(check(0), Ok)
        assert isinstance(check(10), Ok)
        assert isinstance(check(11), Err)
        exclusive = Between(0, 10, inclusive=False)
        assert isinstance(exclusive(5), Ok)
        assert isinstance(exclusive(0), Err)

    def test_positive(self):
        assert Positive()(30) == Ok(30)
        assert Positive()(-1) == Err("Value must be positive")
        assert Positive()(0) == Err("Value must be positive")

    def test_is_true(self):
        assert IsTrue()(True) == Ok(True)
        assert IsTrue()(1) == Err("Value must be true")


class TestMessages:
    def test_empty_message_is_respected(self):
        assert Predicate(lambda x: False, "")(1) == Err("")
        assert Positive("")(-1) == Err("")
        assert Matches(r"\d+", "")("abc") == Err("")
        assert Conforms(int, "")("5") == Err("")

    def test_custom_message_overrides_default(self):
        assert Alphabetic("letters only")("a1") == Err("letters only")
        assert MinLength(3, "too short")("ab") == Err("too short")
