"""Console reporter: ViolationReport -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from guardclause.reporters.plain_text import ordered_keys

if TYPE_CHECKING:
    from guardclause.domain.report import ViolationReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Rule title above the table.
        width: Console width in characters.
        show_summary: Print violation count line.
    """

    title: str = "VALIDATION RESULT"
    width: int = 120
    show_summary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, report: ViolationReport) -> str:
        """Format violation report as rich formatted string.

        Args:
            report: Report to format.

        Returns:
            Formatted string with colors and a member/message table.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

        console.rule(f"[bold]{self._config.title}[/bold]")

        if not report:
            console.print("[bold green]PASSED[/bold green] no violations")
            return output.getvalue()

        if self._config.show_summary:
            console.print(
                f"[bold red]FAILED[/bold red] {report.violation_count} violation(s) "
                f"on {len(report)} member(s)"
            )

        console.print(self._build_table(report))
        return output.getvalue()

    def _build_table(self, report: ViolationReport) -> Table:
        """One row per message; member name only on its first row."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Member", style="yellow")
        table.add_column("Message")

        for key in ordered_keys(report):
            for index, message in enumerate(report[key]):
                table.add_row(key if index == 0 else "", message)

        return table
