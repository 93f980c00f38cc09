"""Shared utility functions for qtgen.

Provides the Rich console and logging setup, status printers, the file
writer used for generated output, and the named console echo used when no
output directory is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(verbose: bool = False, target: Console | None = None) -> None:
    """Route ``qtgen`` log records to a Rich handler.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
        target: Console to log to (defaults to a stderr console).
    """
    logger = logging.getLogger("qtgen")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=target or Console(stderr=True), show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text_file(path: str | Path, content: str) -> Path:
    """Create parent directories and write *content* to *path*.

    Returns:
        The written path.

    Raises:
        OSError: If a directory cannot be created or the file written.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def echo_with_name(content: str, name: str, target: Console | None = None) -> None:
    """Print generated *content* framed by markers naming the output file.

    The text is written verbatim: no markup, highlighting or wrapping.
    """
    out = target or console
    out.out(f">>>>>>> {name}", highlight=False)
    out.out(content, end="", highlight=False)
    if content and not content.endswith("\n"):
        out.out("", highlight=False)
    out.out(f"<<<<<<< {name}", highlight=False)


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


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
