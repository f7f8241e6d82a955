"""Domain exceptions: all public errors of guardclause.

Every guard failure maps to exactly one of these types.
Each error also inherits the builtin it semantically is (ValueError,
TypeError), so callers that only know the builtins still catch them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guardclause.domain.report import ViolationReport


class GuardClauseError(Exception):
    """Base for all guardclause exceptions.

    Allows: except GuardClauseError to catch all library errors.
    """


class ArgumentError(GuardClauseError, ValueError):
    """Argument is present but structurally invalid.

    Raised for empty, blank, pattern mismatch, failed custom predicate,
    and malformed guard calls (e.g. inverted bounds).

    Attributes:
        name: Subject name (argument or property).
        value: Attempted value.
        message: Final message (custom or default template).
    """

    def __init__(self, name: str, value: object, message: str) -> None:
        """Initialize with subject name, attempted value and message."""
        self.name = name
        self.value = value
        self.message = message
        super().__init__(f"{message} (Parameter '{name}')")


class NullArgumentError(ArgumentError, TypeError):
    """Argument is None.

    Inherits TypeError: None is never an instance of the expected type.
    """

    def __init__(self, name: str, message: str) -> None:
        """Initialize with subject name and message."""
        super().__init__(name, None, message)


class ArgumentOutOfRangeError(ArgumentError):
    """Numeric, length or temporal value outside its bound(s)."""


class ModelValidationError(GuardClauseError, ValueError):
    """Declarative model validation failed.

    Raised only by validate_and_throw(), never by guards.

    Attributes:
        report: All violations grouped by member.
    """

    def __init__(self, report: ViolationReport) -> None:
        # lazy: reporters import domain at module level
        from guardclause.reporters.plain_text import format_report

        if not report:
            raise ValueError("ModelValidationError requires at least one violation")

        self.report = report
        super().__init__(format_report(report))
