"""Throw dispatcher: the only place guard errors are built.

One routine per error category. Guards call these on the failure
path only, passing the default template and its fields unformatted,
so message building never runs for valid input.

A custom message, when given, replaces the default template verbatim.
"""

from __future__ import annotations

from typing import NoReturn

from guardclause.domain.exceptions import (
    ArgumentError,
    ArgumentOutOfRangeError,
    NullArgumentError,
)


def _render(name: str, message: str | None, template: str, fields: dict[str, object]) -> str:
    if message is not None:
        return message
    return template.format(name=name, **fields)


def throw_null(name: str, message: str | None = None) -> NoReturn:
    """Raise NullArgumentError for subject `name`."""
    raise NullArgumentError(name, _render(name, message, "'{name}' must not be None", {}))


def throw_argument(
    name: str,
    value: object,
    message: str | None,
    template: str,
    **fields: object,
) -> NoReturn:
    """Raise ArgumentError (present but structurally invalid).

    Args:
        name: Subject name
        value: Attempted value
        message: Custom message, overrides template
        template: Default message, str.format() template
        **fields: Template fields besides {name} and {value}
    """
    fields.setdefault("value", value)
    raise ArgumentError(name, value, _render(name, message, template, fields))


def throw_out_of_range(
    name: str,
    value: object,
    message: str | None,
    template: str,
    **fields: object,
) -> NoReturn:
    """Raise ArgumentOutOfRangeError (numeric/length/temporal bound violated).

    Args:
        name: Subject name
        value: Attempted value
        message: Custom message, overrides template
        template: Default message, str.format() template
        **fields: Template fields besides {name} and {value}
    """
    fields.setdefault("value", value)
    raise ArgumentOutOfRangeError(name, value, _render(name, message, template, fields))
