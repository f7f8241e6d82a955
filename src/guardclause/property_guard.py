"""Property guards: argument guards for setters and initialisers.

Same catalog as guardclause.guard. The subject name defaults to the
name of the calling function, which for a property setter is the
property name:

    @price.setter
    def price(self, value: Decimal) -> None:
        self._price = property_guard.positive(value)   # error names 'price'

Each guard is a thin forward to guardclause.guard. Name resolution
reads the caller's code object name (interned, no allocation).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from guardclause import guard
from guardclause.domain import rules

if TYPE_CHECKING:
    import re
    from collections.abc import Callable, Sized
    from datetime import date

    from guardclause.domain.rules import Comparable


def _member_name() -> str:
    """Name of the function that called the property guard."""
    # 0 = _member_name, 1 = property guard, 2 = setter
    return sys._getframe(2).f_code.co_name  # noqa: SLF001


def not_null[T](value: T | None, *, name: str | None = None, message: str | None = None) -> T:
    """See guard.not_null."""
    return guard.not_null(value, name=name or _member_name(), message=message)


def not_empty[S: Sized](
    value: S | None, *, name: str | None = None, message: str | None = None
) -> S:
    """See guard.not_empty."""
    return guard.not_empty(value, name=name or _member_name(), message=message)


def not_null_or_empty[S: Sized](
    value: S | None, *, name: str | None = None, message: str | None = None
) -> S:
    """See guard.not_empty."""
    return guard.not_empty(value, name=name or _member_name(), message=message)


def not_null_or_white_space(
    value: str | None, *, name: str | None = None, message: str | None = None
) -> str:
    """See guard.not_null_or_white_space."""
    return guard.not_null_or_white_space(value, name=name or _member_name(), message=message)


def non_zero[N: Comparable](
    value: N | None, *, name: str | None = None, message: str | None = None
) -> N:
    """See guard.non_zero."""
    return guard.non_zero(value, name=name or _member_name(), message=message)


def positive[N: Comparable](
    value: N | None, *, name: str | None = None, message: str | None = None
) -> N:
    """See guard.positive."""
    return guard.positive(value, name=name or _member_name(), message=message)


def non_negative[N: Comparable](
    value: N | None, *, name: str | None = None, message: str | None = None
) -> N:
    """See guard.non_negative."""
    return guard.non_negative(value, name=name or _member_name(), message=message)


def minimum[N: Comparable](
    value: N | None, minimum: N, *, name: str | None = None, message: str | None = None
) -> N:
    """See guard.minimum."""
    return guard.minimum(value, minimum, name=name or _member_name(), message=message)


def maximum[N: Comparable](
    value: N | None, maximum: N, *, name: str | None = None, message: str | None = None
) -> N:
    """See guard.maximum."""
    return guard.maximum(value, maximum, name=name or _member_name(), message=message)


def within_range[N: Comparable](
    value: N | None,
    minimum: N,
    maximum: N,
    *,
    name: str | None = None,
    message: str | None = None,
) -> N:
    """See guard.within_range."""
    return guard.within_range(
        value, minimum, maximum, name=name or _member_name(), message=message
    )


def exact_length[S: Sized](
    value: S | None, length: int, *, name: str | None = None, message: str | None = None
) -> S:
    """See guard.exact_length."""
    return guard.exact_length(value, length, name=name or _member_name(), message=message)


def min_length[S: Sized](
    value: S | None, minimum: int, *, name: str | None = None, message: str | None = None
) -> S:
    """See guard.min_length."""
    return guard.min_length(value, minimum, name=name or _member_name(), message=message)


def max_length[S: Sized](
    value: S | None, maximum: int, *, name: str | None = None, message: str | None = None
) -> S:
    """See guard.max_length."""
    return guard.max_length(value, maximum, name=name or _member_name(), message=message)


def length_within_range[S: Sized](
    value: S | None,
    minimum: int,
    maximum: int,
    *,
    name: str | None = None,
    message: str | None = None,
) -> S:
    """See guard.length_within_range."""
    return guard.length_within_range(
        value, minimum, maximum, name=name or _member_name(), message=message
    )


def matches_regex(
    value: str | None,
    pattern: re.Pattern[str] | str,
    *,
    name: str | None = None,
    message: str | None = None,
) -> str:
    """See guard.matches_regex."""
    return guard.matches_regex(value, pattern, name=name or _member_name(), message=message)


def email_address(
    value: str | None, *, name: str | None = None, message: str | None = None
) -> str:
    """See guard.email_address."""
    return guard.email_address(value, name=name or _member_name(), message=message)


def url(
    value: str | None,
    *,
    schemes: frozenset[str] = rules.DEFAULT_URL_SCHEMES,
    name: str | None = None,
    message: str | None = None,
) -> str:
    """See guard.url."""
    return guard.url(value, schemes=schemes, name=name or _member_name(), message=message)


def in_past[D: date](
    value: D | None, *, now: date | None = None, name: str | None = None, message: str | None = None
) -> D:
    """See guard.in_past."""
    return guard.in_past(value, now=now, name=name or _member_name(), message=message)


def in_future[D: date](
    value: D | None, *, now: date | None = None, name: str | None = None, message: str | None = None
) -> D:
    """See guard.in_future."""
    return guard.in_future(value, now=now, name=name or _member_name(), message=message)


def requires[T](
    value: T, predicate: Callable[[T], bool], message: str, *, name: str | None = None
) -> T:
    """See guard.requires."""
    return guard.requires(value, predicate, message, name=name or _member_name())
