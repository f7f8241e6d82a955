"""guardclause domain layer.

Rules, throw dispatcher, exceptions and the violation report.
Pure stdlib, no external dependencies.
"""

from guardclause.domain.exceptions import (
    ArgumentError,
    ArgumentOutOfRangeError,
    GuardClauseError,
    ModelValidationError,
    NullArgumentError,
)
from guardclause.domain.report import GLOBAL_KEY, ValidationResult, ViolationReport

__all__ = [
    # Exceptions
    "GuardClauseError",
    "ArgumentError",
    "NullArgumentError",
    "ArgumentOutOfRangeError",
    "ModelValidationError",
    # Report
    "GLOBAL_KEY",
    "ValidationResult",
    "ViolationReport",
]
