"""Declarative model validation.

Constraints live in Annotated field metadata and are enforced by pydantic;
try_validate() runs all of them plus the model's validate() hook and
groups the violations.
"""

from guardclause.annotations.constraints import (
    Check,
    Constraint,
    EmailAddress,
    Required,
    Url,
)
from guardclause.annotations.context import ValidationContext
from guardclause.annotations.discovery import (
    CONTEXT_KEY,
    DeclaredRuleDiscovery,
    RuleDiscovery,
    ValidatableObject,
)
from guardclause.annotations.validator import (
    group_violations,
    try_validate,
    validate,
    validate_and_throw,
)

__all__ = [
    # Constraints
    "Check",
    "Constraint",
    "EmailAddress",
    "Required",
    "Url",
    # Discovery
    "CONTEXT_KEY",
    "DeclaredRuleDiscovery",
    "RuleDiscovery",
    "ValidatableObject",
    "ValidationContext",
    # Aggregator
    "group_violations",
    "try_validate",
    "validate",
    "validate_and_throw",
]
