#!/usr/bin/env python3
"""
Notes CLI.

Command-line client for the notes application.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                  # Show help

    # Notes
    python cli.py notes list                              # List notes by title
    python cli.py notes list --sort date --search milk    # Sorted and filtered
    python cli.py notes add Groceries -c "milk, eggs"     # Add a note
    python cli.py notes add Taxes -r "2026-04-01 09:00"   # Add with a reminder
    python cli.py notes show <id>                         # Show one note
    python cli.py notes edit <id> --title Shopping        # Edit a note
    python cli.py notes delete 0 --search milk            # Delete by listed position

    # Reminders
    python cli.py reminders list                          # Pending reminders
    python cli.py reminders due                           # Deliver due reminders
    python cli.py reminders cancel <id>                   # Cancel a pending reminder

    # System info
    python cli.py system info                             # Show app info
    python cli.py system config                           # Show configuration

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from modules.cli.commands import notes_app, reminders_app, system_app

app = typer.Typer(
    name="notes",
    help="Notes CLI - keep notes, search them, and get reminded.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")
app.add_typer(reminders_app, name="reminders")
app.add_typer(system_app, name="system")


def _validate_project_root() -> None:
    """Validate that the configuration directory can be located."""
    from modules.backend.core.config import find_project_root

    try:
        find_project_root()
    except RuntimeError:
        console.print("[red]Error: .project_root not found. Run from project root.[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Notes CLI.

    Notes are kept in a local preference file; reminders are held by a
    local notification center until delivered with 'reminders due'.
    """
    _validate_project_root()

    from modules.backend.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
