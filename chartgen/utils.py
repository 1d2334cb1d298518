"""Shared utility functions for chartgen.

Provides the Rich consoles used for normal output and diagnostics, coloured
message helpers, a summary table printer, and a small directory helper.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    out: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to (defaults to the stdout console).
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    (out or console).print(table)


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message (stderr by default)."""
    (out or err_console).print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message (stderr by default)."""
    (out or err_console).print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)
