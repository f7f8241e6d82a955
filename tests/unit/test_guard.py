"""Tests for guard.py (argument guards)."""

import math
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal

import pytest

from guardclause import guard
from guardclause.domain.exceptions import (
    ArgumentError,
    ArgumentOutOfRangeError,
    NullArgumentError,
)

NAN = float("nan")


class TestNotNull:
    """Tests for not_null."""

    def test_returns_value(self) -> None:
        value = object()
        assert guard.not_null(value, name="value") is value

    @pytest.mark.parametrize("value", [0, "", [], False])
    def test_falsy_values_pass(self, value: object) -> None:
        assert guard.not_null(value) is value

    def test_none_raises(self) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            guard.not_null(None, name="user")
        assert exc_info.value.name == "user"

    def test_default_name(self) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            guard.not_null(None)
        assert exc_info.value.name == guard.DEFAULT_NAME

    def test_custom_message(self) -> None:
        with pytest.raises(NullArgumentError, match="need a user"):
            guard.not_null(None, name="user", message="need a user")


class TestNotEmpty:
    """Tests for not_empty / not_null_or_empty."""

    @pytest.mark.parametrize("value", ["x", [1], {"a": 1}, (0,)])
    def test_returns_value(self, value: object) -> None:
        assert guard.not_empty(value) is value  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["", [], {}, ()])
    def test_empty_raises_argument_error(self, value: object) -> None:
        with pytest.raises(ArgumentError, match="must not be empty") as exc_info:
            guard.not_empty(value, name="items")  # type: ignore[arg-type]
        assert not isinstance(exc_info.value, NullArgumentError)

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.not_empty(None, name="items")

    def test_alias(self) -> None:
        assert guard.not_null_or_empty is guard.not_empty


class TestNotNullOrWhiteSpace:
    """Tests for not_null_or_white_space."""

    @pytest.mark.parametrize("value", ["a", " a ", "hello world", "\tx\n"])
    def test_non_blank_returned_unchanged(self, value: str) -> None:
        assert guard.not_null_or_white_space(value, name="s") is value

    @pytest.mark.parametrize("value", ["", " ", "   ", "\t", "\n\r "])
    def test_blank_raises_argument_error(self, value: str) -> None:
        with pytest.raises(ArgumentError, match="'s' must not be empty or whitespace"):
            guard.not_null_or_white_space(value, name="s")

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.not_null_or_white_space(None, name="s")


class TestNumericSigns:
    """Tests for non_zero, positive, non_negative."""

    @pytest.mark.parametrize("value", [1, -1, 0.1, Decimal("-2.5")])
    def test_non_zero_passes(self, value: object) -> None:
        assert guard.non_zero(value) == value  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, Decimal(0), NAN])
    def test_non_zero_fails(self, value: object) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            guard.non_zero(value, name="divisor")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [1, 0.001, Decimal("1e-9"), math.inf])
    def test_positive_passes(self, value: object) -> None:
        assert guard.positive(value) == value  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -1, -0.5, NAN, Decimal("NaN")])
    def test_positive_fails(self, value: object) -> None:
        with pytest.raises(ArgumentOutOfRangeError, match="'price' must be positive"):
            guard.positive(value, name="price")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, 0.0, 5])
    def test_non_negative_passes(self, value: object) -> None:
        assert guard.non_negative(value) == value  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [-1, -0.1, NAN])
    def test_non_negative_fails(self, value: object) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            guard.non_negative(value)  # type: ignore[arg-type]

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.positive(None, name="price")

    def test_error_carries_value(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            guard.positive(-3, name="price")
        assert exc_info.value.value == -3
        assert exc_info.value.message == "'price' must be positive, got -3"


class TestMinimumMaximum:
    """Tests for minimum and maximum."""

    def test_minimum_inclusive(self) -> None:
        assert guard.minimum(5, 5) == 5
        assert guard.minimum(6, 5) == 6

    def test_minimum_fails(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError, match="'age' must be >= 18, got 17"):
            guard.minimum(17, 18, name="age")

    def test_maximum_inclusive(self) -> None:
        assert guard.maximum(5, 5) == 5
        assert guard.maximum(4.5, 5) == 4.5

    def test_maximum_fails(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError, match="'age' must be <= 130, got 131"):
            guard.maximum(131, 130, name="age")

    def test_nan_value_fails(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            guard.minimum(NAN, 0.0)
        with pytest.raises(ArgumentOutOfRangeError):
            guard.maximum(NAN, 0.0)

    def test_nan_bound_is_usage_error(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            guard.minimum(1.0, NAN)
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)
        assert exc_info.value.name == "minimum"

    @pytest.mark.parametrize("check", [guard.minimum, guard.maximum])
    def test_nan_bound_reported_before_missing_value(self, check: Callable[..., object]) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            check(None, NAN, name="age")
        assert not isinstance(exc_info.value, NullArgumentError)
        assert exc_info.value.name == check.__name__


class TestWithinRange:
    """Tests for within_range."""

    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_inside_returns_value(self, value: int) -> None:
        assert guard.within_range(value, 1, 5) == value

    @pytest.mark.parametrize("value", [0, 6, -100])
    def test_outside_raises_out_of_range(self, value: int) -> None:
        with pytest.raises(ArgumentOutOfRangeError, match="must be between 1 and 5"):
            guard.within_range(value, 1, 5, name="level")

    def test_float_bounds(self) -> None:
        assert guard.within_range(0.5, 0.0, 1.0) == 0.5
        with pytest.raises(ArgumentOutOfRangeError):
            guard.within_range(1.0001, 0.0, 1.0)

    def test_nan_value_fails(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            guard.within_range(NAN, 0.0, 1.0)

    @pytest.mark.parametrize("value", [0, 3, 10, None])
    def test_inverted_bounds_is_usage_error_regardless_of_value(self, value: int | None) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            guard.within_range(value, 5, 3, name="level")
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)
        assert not isinstance(exc_info.value, NullArgumentError)
        assert exc_info.value.name == "minimum"

    def test_nan_bound_is_usage_error(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            guard.within_range(0.5, 0.0, NAN)
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)

    def test_custom_message(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            guard.within_range(9, 1, 5, name="level", message="level must be 1-5")
        assert exc_info.value.message == "level must be 1-5"


class TestLengthGuards:
    """Tests for exact_length, min_length, max_length, length_within_range."""

    def test_exact_length(self) -> None:
        assert guard.exact_length("abc", 3) == "abc"
        with pytest.raises(ArgumentOutOfRangeError, match="'code' must have length 3, got 2"):
            guard.exact_length("ab", 3, name="code")

    def test_min_length(self) -> None:
        assert guard.min_length([1, 2], 2) == [1, 2]
        with pytest.raises(ArgumentOutOfRangeError, match="length >= 2, got 1"):
            guard.min_length([1], 2)

    def test_max_length(self) -> None:
        assert guard.max_length("ab", 2) == "ab"
        with pytest.raises(ArgumentOutOfRangeError, match="length <= 2, got 3"):
            guard.max_length("abc", 2)

    def test_length_within_range(self) -> None:
        assert guard.length_within_range("abc", 1, 3) == "abc"
        with pytest.raises(ArgumentOutOfRangeError, match="between 1 and 3, got 0"):
            guard.length_within_range("", 1, 3)

    def test_length_within_range_inverted_bounds(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            guard.length_within_range("abc", 4, 2)
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)

    @pytest.mark.parametrize(
        "call",
        [
            lambda: guard.exact_length("a", -1),
            lambda: guard.min_length("a", -1),
            lambda: guard.max_length("a", -1),
            lambda: guard.length_within_range("a", -1, 3),
        ],
    )
    def test_negative_bound_is_usage_error(self, call: object) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            call()  # type: ignore[operator]
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.max_length(None, 3)


class TestPatternGuards:
    """Tests for matches_regex, email_address, url."""

    def test_matches_regex_str(self) -> None:
        assert guard.matches_regex("AB-12", r"[A-Z]{2}-\d{2}") == "AB-12"

    def test_matches_regex_compiled(self) -> None:
        pattern = re.compile(r"[a-z]+")
        with pytest.raises(ArgumentError, match=r"must match pattern '\[a-z\]\+'"):
            guard.matches_regex("abc1", pattern, name="slug")

    def test_matches_regex_requires_full_match(self) -> None:
        with pytest.raises(ArgumentError):
            guard.matches_regex("AB-123", r"[A-Z]{2}-\d{2}")

    def test_email_valid(self) -> None:
        assert guard.email_address("user@example.com") == "user@example.com"

    def test_email_invalid(self) -> None:
        with pytest.raises(ArgumentError, match="valid e-mail address") as exc_info:
            guard.email_address("not-an-email", name="email")
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)

    def test_url_valid(self) -> None:
        assert guard.url("https://example.com/a?b=c") == "https://example.com/a?b=c"

    def test_url_invalid(self) -> None:
        with pytest.raises(ArgumentError, match="valid absolute URL"):
            guard.url("www.example.com", name="homepage")

    def test_url_custom_schemes(self) -> None:
        assert guard.url("s3://bucket/key", schemes=frozenset({"s3"})) == "s3://bucket/key"

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.email_address(None)


class TestTemporalGuards:
    """Tests for in_past and in_future."""

    def test_in_past_with_past_instant(self) -> None:
        past = datetime.now(UTC) - timedelta(days=1)
        assert guard.in_past(past) == past

    def test_in_past_with_future_instant(self) -> None:
        future = datetime.now(UTC) + timedelta(days=1)
        with pytest.raises(ArgumentOutOfRangeError, match="must be in the past"):
            guard.in_past(future, name="born_at")

    def test_in_future_with_future_instant(self) -> None:
        future = datetime.now() + timedelta(hours=1)
        assert guard.in_future(future) == future

    def test_in_future_with_past_instant(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError, match="must be in the future"):
            guard.in_future(datetime(2000, 1, 1), name="expires_at")

    def test_dates(self) -> None:
        assert guard.in_past(date(2000, 1, 1)) == date(2000, 1, 1)
        with pytest.raises(ArgumentOutOfRangeError):
            guard.in_future(date(2000, 1, 1))

    def test_explicit_reference_is_strict(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
        with pytest.raises(ArgumentOutOfRangeError):
            guard.in_past(now, now=now)
        with pytest.raises(ArgumentOutOfRangeError):
            guard.in_future(now, now=now)
        assert guard.in_past(now - timedelta(microseconds=1), now=now)

    def test_none_raises_null(self) -> None:
        with pytest.raises(NullArgumentError):
            guard.in_past(None)


class TestRequires:
    """Tests for requires."""

    def test_true_returns_value(self) -> None:
        assert guard.requires(4, lambda n: n % 2 == 0, "must be even") == 4

    def test_false_raises_with_exact_message(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            guard.requires(3, lambda n: n % 2 == 0, "must be even", name="n")
        assert exc_info.value.message == "must be even"
        assert exc_info.value.name == "n"
        assert exc_info.value.value == 3
        assert not isinstance(exc_info.value, ArgumentOutOfRangeError)

    def test_predicate_called_once(self) -> None:
        calls: list[int] = []

        def predicate(n: int) -> bool:
            calls.append(n)
            return True

        guard.requires(7, predicate, "unused")
        assert calls == [7]

    def test_predicate_exception_propagates(self) -> None:
        def predicate(n: int) -> bool:
            raise KeyError("boom")

        with pytest.raises(KeyError):
            guard.requires(1, predicate, "unused")


class TestIdempotence:
    """Repeated guard calls on valid input produce the same outcome."""

    def test_repeated_calls(self) -> None:
        values = [guard.within_range(3, 1, 5) for _ in range(100)]
        assert values == [3] * 100

    def test_failure_is_deterministic(self) -> None:
        messages = []
        for _ in range(3):
            with pytest.raises(ArgumentOutOfRangeError) as exc_info:
                guard.positive(-1, name="n")
            messages.append(str(exc_info.value))
        assert len(set(messages)) == 1
