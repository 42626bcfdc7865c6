"""Shared console helpers for create-vv.

All user-facing output goes through a single Rich ``Console`` so tests can
swap it for a recording console.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_scaffolding(root: Path) -> None:
    """Announce the directory the project is being written to."""
    console.print()
    console.print(f"Scaffolding project in [bold]{escape(str(root))}[/bold]...")


def print_next_steps(commands: list[str]) -> None:
    """Print the follow-up shell commands, one per line."""
    console.print()
    console.print("[bold green]Done.[/bold green] Now run:")
    console.print()
    for command in commands:
        console.print(f"  [bright_cyan]{escape(command)}[/bright_cyan]", highlight=False)
    console.print()


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
