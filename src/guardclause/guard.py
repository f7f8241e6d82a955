"""Argument guards: fail-fast checks at function/constructor entry.

Each guard = one rule from guardclause.domain.rules + one throw
dispatcher call on failure. Guards return the validated value
unchanged, so they compose inline:

    def __init__(self, name: str, retries: int) -> None:
        self._name = guard.not_null_or_white_space(name, name="name")
        self._retries = guard.non_negative(retries, name="retries")

`name` labels the subject in the raised error. Python cannot capture
the call-site expression, so it defaults to DEFAULT_NAME.
`message` replaces the default error message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from guardclause.domain import rules
from guardclause.domain.throw import throw_argument, throw_null, throw_out_of_range

if TYPE_CHECKING:
    import re
    from collections.abc import Callable, Sized
    from datetime import date

    from guardclause.domain.rules import Comparable

DEFAULT_NAME = "argument"
"""Subject name used when the caller does not pass one."""


# =============================================================================
# Nullness / emptiness
# =============================================================================


def not_null[T](value: T | None, *, name: str = DEFAULT_NAME, message: str | None = None) -> T:
    """Value must not be None.

    Raises:
        NullArgumentError: value is None
    """
    if value is None:
        throw_null(name, message)
    return value


def not_empty[S: Sized](
    value: S | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> S:
    """Sized value (str, list, dict, ...) must not be None or empty.

    Raises:
        NullArgumentError: value is None
        ArgumentError: len(value) == 0
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_not_empty(value):
        throw_argument(name, value, message, "'{name}' must not be empty")
    return value


not_null_or_empty = not_empty


def not_null_or_white_space(
    value: str | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> str:
    """String must not be None, empty, or whitespace only.

    Raises:
        NullArgumentError: value is None
        ArgumentError: value is empty or whitespace only
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_not_blank(value):
        throw_argument(name, value, message, "'{name}' must not be empty or whitespace")
    return value


# =============================================================================
# Numeric
# =============================================================================


def non_zero[N: Comparable](
    value: N | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> N:
    """Number must not be zero (or NaN).

    Raises:
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value == 0 or NaN
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_non_zero(value):
        throw_out_of_range(name, value, message, "'{name}' must not be zero, got {value!r}")
    return value


def positive[N: Comparable](
    value: N | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> N:
    """Number must be > 0.

    Raises:
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value <= 0 or NaN
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_positive(value):
        throw_out_of_range(name, value, message, "'{name}' must be positive, got {value!r}")
    return value


def non_negative[N: Comparable](
    value: N | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> N:
    """Number must be >= 0.

    Raises:
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value < 0 or NaN
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_non_negative(value):
        throw_out_of_range(name, value, message, "'{name}' must not be negative, got {value!r}")
    return value


def minimum[N: Comparable](
    value: N | None, minimum: N, *, name: str = DEFAULT_NAME, message: str | None = None
) -> N:
    """Number must be >= minimum.

    A NaN bound is a malformed call, reported regardless of value.

    Raises:
        ArgumentError: minimum is NaN
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value < minimum or NaN
    """
    if rules.is_nan(minimum):
        throw_argument("minimum", minimum, None, "'{name}' must not be NaN")
    if value is None:
        throw_null(name, message)
    if not rules.is_at_least(value, minimum):
        throw_out_of_range(
            name, value, message, "'{name}' must be >= {minimum!r}, got {value!r}", minimum=minimum
        )
    return value


def maximum[N: Comparable](
    value: N | None, maximum: N, *, name: str = DEFAULT_NAME, message: str | None = None
) -> N:
    """Number must be <= maximum.

    A NaN bound is a malformed call, reported regardless of value.

    Raises:
        ArgumentError: maximum is NaN
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value > maximum or NaN
    """
    if rules.is_nan(maximum):
        throw_argument("maximum", maximum, None, "'{name}' must not be NaN")
    if value is None:
        throw_null(name, message)
    if not rules.is_at_most(value, maximum):
        throw_out_of_range(
            name, value, message, "'{name}' must be <= {maximum!r}, got {value!r}", maximum=maximum
        )
    return value


def within_range[N: Comparable](
    value: N | None,
    minimum: N,
    maximum: N,
    *,
    name: str = DEFAULT_NAME,
    message: str | None = None,
) -> N:
    """Number must satisfy minimum <= value <= maximum.

    Bounds are checked first: inverted or NaN bounds are a malformed
    call, reported regardless of value.

    Raises:
        ArgumentError: minimum > maximum, or a bound is NaN
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value outside [minimum, maximum] or NaN
    """
    if not rules.is_ordered_bounds(minimum, maximum):
        _throw_bad_bounds(minimum, maximum)
    if value is None:
        throw_null(name, message)
    if not rules.is_within(value, minimum, maximum):
        throw_out_of_range(
            name,
            value,
            message,
            "'{name}' must be between {minimum!r} and {maximum!r}, got {value!r}",
            minimum=minimum,
            maximum=maximum,
        )
    return value


# =============================================================================
# Length
# =============================================================================


def exact_length[S: Sized](
    value: S | None, length: int, *, name: str = DEFAULT_NAME, message: str | None = None
) -> S:
    """len(value) must equal length.

    Raises:
        ArgumentError: length < 0
        NullArgumentError: value is None
        ArgumentOutOfRangeError: len(value) != length
    """
    if length < 0:
        _throw_negative_length("length", length)
    if value is None:
        throw_null(name, message)
    if not rules.has_length(value, length):
        throw_out_of_range(
            name,
            value,
            message,
            "'{name}' must have length {length}, got {actual}",
            length=length,
            actual=len(value),
        )
    return value


def min_length[S: Sized](
    value: S | None, minimum: int, *, name: str = DEFAULT_NAME, message: str | None = None
) -> S:
    """len(value) must be >= minimum.

    Raises:
        ArgumentError: minimum < 0
        NullArgumentError: value is None
        ArgumentOutOfRangeError: len(value) < minimum
    """
    if minimum < 0:
        _throw_negative_length("minimum", minimum)
    if value is None:
        throw_null(name, message)
    if not rules.has_min_length(value, minimum):
        throw_out_of_range(
            name,
            value,
            message,
            "'{name}' must have length >= {minimum}, got {actual}",
            minimum=minimum,
            actual=len(value),
        )
    return value


def max_length[S: Sized](
    value: S | None, maximum: int, *, name: str = DEFAULT_NAME, message: str | None = None
) -> S:
    """len(value) must be <= maximum.

    Raises:
        ArgumentError: maximum < 0
        NullArgumentError: value is None
        ArgumentOutOfRangeError: len(value) > maximum
    """
    if maximum < 0:
        _throw_negative_length("maximum", maximum)
    if value is None:
        throw_null(name, message)
    if not rules.has_max_length(value, maximum):
        throw_out_of_range(
            name,
            value,
            message,
            "'{name}' must have length <= {maximum}, got {actual}",
            maximum=maximum,
            actual=len(value),
        )
    return value


def length_within_range[S: Sized](
    value: S | None,
    minimum: int,
    maximum: int,
    *,
    name: str = DEFAULT_NAME,
    message: str | None = None,
) -> S:
    """minimum <= len(value) <= maximum.

    Raises:
        ArgumentError: minimum < 0 or minimum > maximum
        NullArgumentError: value is None
        ArgumentOutOfRangeError: len(value) outside bounds
    """
    if minimum < 0:
        _throw_negative_length("minimum", minimum)
    if minimum > maximum:
        _throw_bad_bounds(minimum, maximum)
    if value is None:
        throw_null(name, message)
    if not rules.has_length_within(value, minimum, maximum):
        throw_out_of_range(
            name,
            value,
            message,
            "'{name}' must have length between {minimum} and {maximum}, got {actual}",
            minimum=minimum,
            maximum=maximum,
            actual=len(value),
        )
    return value


# =============================================================================
# Pattern
# =============================================================================


def matches_regex(
    value: str | None,
    pattern: re.Pattern[str] | str,
    *,
    name: str = DEFAULT_NAME,
    message: str | None = None,
) -> str:
    """Whole string must match pattern (re.fullmatch semantics).

    Raises:
        NullArgumentError: value is None
        ArgumentError: value does not match
    """
    if value is None:
        throw_null(name, message)
    if not rules.matches(value, pattern):
        throw_argument(
            name,
            value,
            message,
            "'{name}' must match pattern {pattern!r}, got {value!r}",
            pattern=pattern if isinstance(pattern, str) else pattern.pattern,
        )
    return value


def email_address(
    value: str | None, *, name: str = DEFAULT_NAME, message: str | None = None
) -> str:
    """String must look like an e-mail address (local@domain.tld).

    Raises:
        NullArgumentError: value is None
        ArgumentError: not an e-mail address
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_email_address(value):
        throw_argument(name, value, message, "'{name}' must be a valid e-mail address, got {value!r}")
    return value


def url(
    value: str | None,
    *,
    schemes: frozenset[str] = rules.DEFAULT_URL_SCHEMES,
    name: str = DEFAULT_NAME,
    message: str | None = None,
) -> str:
    """String must be an absolute URL with an allowed scheme and a host.

    Raises:
        NullArgumentError: value is None
        ArgumentError: not an absolute URL
    """
    if value is None:
        throw_null(name, message)
    if not rules.is_url(value, schemes):
        throw_argument(name, value, message, "'{name}' must be a valid absolute URL, got {value!r}")
    return value


# =============================================================================
# Temporal
# =============================================================================


def in_past[D: date](
    value: D | None, *, now: date | None = None, name: str = DEFAULT_NAME, message: str | None = None
) -> D:
    """Date/datetime must be strictly before now (or `now` if given).

    Raises:
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value >= now
    """
    if value is None:
        throw_null(name, message)
    reference = rules.reference_now(value) if now is None else now
    if not rules.is_before(value, reference):
        throw_out_of_range(
            name, value, message, "'{name}' must be in the past, got {value}", reference=reference
        )
    return value


def in_future[D: date](
    value: D | None, *, now: date | None = None, name: str = DEFAULT_NAME, message: str | None = None
) -> D:
    """Date/datetime must be strictly after now (or `now` if given).

    Raises:
        NullArgumentError: value is None
        ArgumentOutOfRangeError: value <= now
    """
    if value is None:
        throw_null(name, message)
    reference = rules.reference_now(value) if now is None else now
    if not rules.is_after(value, reference):
        throw_out_of_range(
            name, value, message, "'{name}' must be in the future, got {value}", reference=reference
        )
    return value


# =============================================================================
# Custom
# =============================================================================


def requires[T](
    value: T, predicate: Callable[[T], bool], message: str, *, name: str = DEFAULT_NAME
) -> T:
    """Caller-supplied predicate must hold for value.

    Extension point for rules outside the catalog. predicate is called
    exactly once. The raised error carries `message` verbatim.

    Raises:
        ArgumentError: predicate(value) is falsy
    """
    if not rules.satisfies(value, predicate):
        throw_argument(name, value, message, "")
    return value


# =============================================================================
# Usage errors
# =============================================================================


def _throw_bad_bounds(minimum: object, maximum: object) -> NoReturn:
    throw_argument(
        "minimum",
        minimum,
        None,
        "'minimum' ({value!r}) must be <= 'maximum' ({maximum!r})",
        maximum=maximum,
    )


def _throw_negative_length(bound_name: str, bound: int) -> NoReturn:
    throw_argument(bound_name, bound, None, "'{name}' must be >= 0, got {value!r}")
