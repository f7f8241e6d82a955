"""Plain text rendering of a ViolationReport.

Stdlib-only formatter for logs and exception messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from guardclause.domain.report import GLOBAL_KEY

if TYPE_CHECKING:
    from guardclause.domain.report import ViolationReport


def format_report(report: ViolationReport) -> str:
    """Format report as indented text.

    Object-level messages first, then members sorted by name
    (report key order carries no meaning).

    Args:
        report: Report to format

    Returns:
        Multi-line string; "Validation passed." for an empty report
    """
    if not report:
        return "Validation passed."

    lines = [f"Validation failed: {report.violation_count} violation(s)"]
    for key in ordered_keys(report):
        lines.append(f"  {key}:")
        lines.extend(f"    - {message}" for message in report[key])
    return "\n".join(lines)


def ordered_keys(report: ViolationReport) -> list[str]:
    """Report keys for display: GLOBAL_KEY first, then members sorted."""
    members = sorted(key for key in report if key != GLOBAL_KEY)
    if GLOBAL_KEY in report:
        return [GLOBAL_KEY, *members]
    return members
