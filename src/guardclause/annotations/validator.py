"""Annotation aggregator: run all declared rules, group violations by member.

Unlike guards this path is NOT fail-fast: every rule runs and every
violation is reported. Callers pick between inspecting the report
(try_validate) and raising (validate_and_throw).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from guardclause import guard
from guardclause.annotations.context import ValidationContext
from guardclause.annotations.discovery import DeclaredRuleDiscovery
from guardclause.domain.exceptions import ModelValidationError
from guardclause.domain.report import EMPTY_REPORT, GLOBAL_KEY, ViolationReport

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from guardclause.annotations.discovery import RuleDiscovery
    from guardclause.domain.report import ValidationResult

logger = logging.getLogger(__name__)

_DEFAULT_DISCOVERY = DeclaredRuleDiscovery()


def group_violations(results: Iterable[ValidationResult]) -> ViolationReport:
    """Group flat violations into a report.

    Each message is appended to every member it names; member-less
    violations go to GLOBAL_KEY. Blank messages and empty member names
    are skipped, so no entry is ever created without a message.

    Args:
        results: Violations in discovery order

    Returns:
        Report (empty if nothing to report)
    """
    grouped: dict[str, list[str]] = {}

    for result in results:
        if not result.message or result.message.isspace():
            continue

        if result.member_names:
            for member_name in result.member_names:
                if not member_name:
                    continue
                grouped.setdefault(member_name, []).append(result.message)
        else:
            grouped.setdefault(GLOBAL_KEY, []).append(result.message)

    if not grouped:
        return EMPTY_REPORT
    return ViolationReport.from_groups(grouped)


def try_validate(
    model: object,
    services: Mapping[type, object] | None = None,
    *,
    discovery: RuleDiscovery | None = None,
) -> tuple[bool, ViolationReport]:
    """Validate model against its declared rules.

    Args:
        model: Object to validate
        services: Optional type -> instance lookup passed to rules
        discovery: Rule discovery (default: DeclaredRuleDiscovery)

    Returns:
        (True, empty report) if valid, else (False, report)

    Raises:
        NullArgumentError: model is None
    """
    guard.not_null(model, name="model")

    context = ValidationContext(model=model, services=services)
    rule_discovery = discovery if discovery is not None else _DEFAULT_DISCOVERY
    report = group_violations(rule_discovery.discover(model, context))

    if report:
        logger.debug(
            "%s failed validation: %d violation(s) on %d key(s)",
            type(model).__name__,
            report.violation_count,
            len(report),
        )
    return report.is_valid, report


def validate(
    model: object,
    services: Mapping[type, object] | None = None,
    *,
    discovery: RuleDiscovery | None = None,
) -> ViolationReport:
    """Validate model and return only the report (empty = valid).

    Raises:
        NullArgumentError: model is None
    """
    _, report = try_validate(model, services, discovery=discovery)
    return report


def validate_and_throw(
    model: object,
    services: Mapping[type, object] | None = None,
    *,
    discovery: RuleDiscovery | None = None,
) -> None:
    """Validate model; raise one aggregate error carrying the full report.

    Raises:
        NullArgumentError: model is None
        ModelValidationError: at least one violation
    """
    is_valid, report = try_validate(model, services, discovery=discovery)
    if not is_valid:
        raise ModelValidationError(report)
