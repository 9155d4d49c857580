"""Rich console utilities for deps-report.

This module provides a shared Rich Console instance and helper functions
for CLI output. Log records go through ``logging_config``; the console is
reserved for step headers, summaries and the final status line.
"""

import os
from typing import Any, List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

IS_CI = os.getenv("CI") == "true"

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "step": "bold blue",
        "highlight": "magenta",
    }
)

# Shared console instance
console = Console(theme=custom_theme, color_system="auto")


def print_step_header(step_num: int, title: str) -> None:
    """
    Print a styled step header.

    Args:
        step_num: Step number
        title: Step title
    """
    step_title = f"STEP {step_num}: {title}"
    if IS_CI:
        console.print(f"[step]{step_title}[/step]")
    else:
        console.print()
        console.rule(f"[step]{step_title}[/step]", style="blue")


def print_summary_table(
    title: str,
    data: List[Tuple[str, Any]],
    show_if_empty: bool = False,
) -> None:
    """
    Print a summary table.

    Args:
        title: Table title
        data: List of (label, value) tuples
        show_if_empty: Whether to show the table if all values are 0/empty
    """
    if not show_if_empty:
        data = [(label, value) for label, value in data if value]

    if not data:
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for label, value in data:
        table.add_row(label, str(value))

    console.print(table)


def print_report_summary(summary) -> None:
    """
    Print per-sheet counts of a finished report.

    Args:
        summary: ReportSummary from the orchestrator
    """
    table = Table(title="Report Summary", show_header=True, header_style="bold")
    table.add_column("Sheet", style="cyan")
    table.add_column("Discovered", justify="right")
    table.add_column("Rows written", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Failed", justify="right")

    for stats in summary.sheets:
        table.add_row(
            stats.sheet,
            str(stats.discovered),
            str(stats.written),
            str(stats.skipped),
            str(stats.failed),
        )

    console.print(table)
    print_summary_table("Output", [("Workbook", summary.output_file)])


def print_final_success() -> None:
    """Print final success message."""
    console.print()
    console.print("[success]✓ SUCCESS![/success] Dependency report written.")
    console.print()


def print_final_failure(message: str) -> None:
    """Print final failure message."""
    console.print()
    console.print(f"[error]✗ FAILED:[/error] {escape(message)}")
    console.print()
