"""guardclause - fail-fast guard clauses and declarative model validation."""

__version__ = "0.1.0"

from guardclause import guard, property_guard
from guardclause.annotations import (
    CONTEXT_KEY,
    Check,
    DeclaredRuleDiscovery,
    EmailAddress,
    Required,
    RuleDiscovery,
    Url,
    ValidatableObject,
    ValidationContext,
    try_validate,
    validate,
    validate_and_throw,
)
from guardclause.domain import (
    GLOBAL_KEY,
    ArgumentError,
    ArgumentOutOfRangeError,
    GuardClauseError,
    ModelValidationError,
    NullArgumentError,
    ValidationResult,
    ViolationReport,
)
from guardclause.reporters import ConsoleConfig, ConsoleReporter, format_report

__all__ = [
    "__version__",
    # Guards
    "guard",
    "property_guard",
    # Aggregator
    "try_validate",
    "validate",
    "validate_and_throw",
    "GLOBAL_KEY",
    "ViolationReport",
    "ValidationResult",
    "ValidationContext",
    "RuleDiscovery",
    "DeclaredRuleDiscovery",
    "ValidatableObject",
    "CONTEXT_KEY",
    # Constraints
    "Check",
    "EmailAddress",
    "Required",
    "Url",
    # Exceptions
    "GuardClauseError",
    "ArgumentError",
    "NullArgumentError",
    "ArgumentOutOfRangeError",
    "ModelValidationError",
    # Reporting
    "ConsoleConfig",
    "ConsoleReporter",
    "format_report",
]
