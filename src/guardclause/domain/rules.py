"""Rule evaluator: pure predicates, one per validation concern.

Each rule returns True if the value satisfies it. Rules never raise
for a failing value and never allocate on the success path.
Shared by the guard facades and the declarative constraints.

None handling is the caller's concern: rules assume a present value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sized
from datetime import date, datetime
from typing import Protocol, Self
from urllib.parse import urlsplit


class Comparable(Protocol):
    """Number-like value: ordered and comparable with 0.

    Covers int, float, Decimal, Fraction uniformly.
    """

    def __lt__(self, other: Self | int, /) -> bool: ...

    def __le__(self, other: Self | int, /) -> bool: ...

    def __gt__(self, other: Self | int, /) -> bool: ...

    def __ge__(self, other: Self | int, /) -> bool: ...


EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+")
DEFAULT_URL_SCHEMES = frozenset({"http", "https", "ftp"})


# =============================================================================
# Nullness / emptiness
# =============================================================================


def is_present(value: object) -> bool:
    """Value is not None."""
    return value is not None


def is_not_empty(value: Sized) -> bool:
    """Sized value has at least one element."""
    return len(value) != 0


def is_not_blank(value: str) -> bool:
    """String has at least one non-whitespace character."""
    return value != "" and not value.isspace()


# =============================================================================
# Numeric
# =============================================================================


def is_nan(value: object) -> bool:
    """NaN is the only value not equal to itself (float, Decimal)."""
    return value != value  # noqa: PLR0124


def is_non_zero(value: Comparable) -> bool:
    """Value is a number other than zero. NaN fails."""
    return value != 0 and not is_nan(value)


def is_positive(value: Comparable) -> bool:
    """Value > 0. NaN fails."""
    return not is_nan(value) and value > 0


def is_non_negative(value: Comparable) -> bool:
    """Value >= 0. NaN fails."""
    return not is_nan(value) and value >= 0


def is_at_least[T: Comparable](value: T, minimum: T) -> bool:
    """Value >= minimum. NaN fails."""
    return not is_nan(value) and value >= minimum


def is_at_most[T: Comparable](value: T, maximum: T) -> bool:
    """Value <= maximum. NaN fails."""
    return not is_nan(value) and value <= maximum


def is_within[T: Comparable](value: T, minimum: T, maximum: T) -> bool:
    """Inclusive range check. NaN fails."""
    return not is_nan(value) and minimum <= value <= maximum


def is_ordered_bounds(minimum: object, maximum: object) -> bool:
    """Bounds are usable: neither NaN and minimum <= maximum."""
    if is_nan(minimum) or is_nan(maximum):
        return False
    return minimum <= maximum  # type: ignore[operator]


# =============================================================================
# Length
# =============================================================================


def has_length(value: Sized, length: int) -> bool:
    """len(value) == length."""
    return len(value) == length


def has_min_length(value: Sized, minimum: int) -> bool:
    """len(value) >= minimum."""
    return len(value) >= minimum


def has_max_length(value: Sized, maximum: int) -> bool:
    """len(value) <= maximum."""
    return len(value) <= maximum


def has_length_within(value: Sized, minimum: int, maximum: int) -> bool:
    """minimum <= len(value) <= maximum."""
    return minimum <= len(value) <= maximum


# =============================================================================
# Pattern
# =============================================================================


def matches(value: str, pattern: re.Pattern[str] | str) -> bool:
    """Whole string matches pattern.

    str patterns are compiled through the re module cache.
    """
    if isinstance(pattern, str):
        return re.fullmatch(pattern, value) is not None
    return pattern.fullmatch(value) is not None


def is_email_address(value: str) -> bool:
    """Single '@', non-empty local part, dotted domain, no whitespace."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: str, schemes: frozenset[str] = DEFAULT_URL_SCHEMES) -> bool:
    """Absolute URL with allowed scheme and non-empty host."""
    try:
        parts = urlsplit(value)
    except ValueError:
        # urlsplit rejects malformed netloc (e.g. bad IPv6 brackets)
        return False
    return parts.scheme.lower() in schemes and bool(parts.hostname)


# =============================================================================
# Temporal
# =============================================================================


def reference_now(value: date) -> date:
    """Current instant comparable with value.

    Aware datetime -> now in the same tz. Naive datetime -> local naive now.
    date -> today.
    """
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    return date.today()


def is_before(value: date, reference: date) -> bool:
    """Value strictly before reference."""
    return value < reference


def is_after(value: date, reference: date) -> bool:
    """Value strictly after reference."""
    return value > reference


# =============================================================================
# Custom
# =============================================================================


def satisfies[T](value: T, predicate: Callable[[T], bool]) -> bool:
    """Caller-supplied predicate holds for value."""
    return bool(predicate(value))
