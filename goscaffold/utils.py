"""Rich-based console output helpers shared by the CLI and the generator."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
# Errors go to stderr so a failing run prints nothing on stdout.
error_console = Console(stderr=True)


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_error(message: str) -> None:
    """Print a red one-line error message to stderr."""
    error_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True
    )

