"""Reporters for violation reports.

format_report is stdlib-only; ConsoleReporter renders with rich.
"""

from guardclause.reporters.console import ConsoleConfig, ConsoleReporter
from guardclause.reporters.plain_text import format_report

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "format_report",
]
