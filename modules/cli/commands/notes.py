"""
Note Commands.

Create, list, edit and delete notes.
"""

from datetime import datetime
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from modules.backend.core.config import get_display_timezone
from modules.backend.core.dependencies import get_note_service
from modules.backend.core.exceptions import ApplicationError, ValidationError
from modules.backend.core.utils import from_display, to_display
from modules.backend.schemas.note import Note, SortOption
from modules.backend.services.editor import EditSession

app = typer.Typer(help="Note commands")
console = Console()

DATE_FORMAT = "%Y-%m-%d %H:%M"


def _parse_when(value: str) -> datetime:
    """Parse a user-entered reminder time in the display timezone into naive UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(
            f"Invalid date: {value!r} (expected YYYY-MM-DD HH:MM)",
        ) from e
    return from_display(parsed, get_display_timezone())


def _format(value: datetime | None) -> str:
    if value is None:
        return ""
    return to_display(value, get_display_timezone()).strftime(DATE_FORMAT)


def _fail(error: ApplicationError) -> None:
    console.print(f"[red]Error: {error.message}[/red]")
    raise typer.Exit(1)


def _notes_table(notes: list[Note], title: str) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Date")
    table.add_column("Reminder", style="yellow")
    table.add_column("ID", style="dim")

    for position, note in enumerate(notes):
        table.add_row(
            str(position),
            note.title,
            _format(note.date),
            _format(note.reminder_date),
            str(note.id),
        )
    return table


@app.command("list")
def list_notes(
    sort: Optional[SortOption] = typer.Option(None, "--sort", "-s", help="Order by title or date"),
    search: str = typer.Option("", "--search", "-q", help="Keep notes whose title or content contains this"),
) -> None:
    """
    List notes in display order.

    The # column is the position used by 'notes delete'.

    Examples:
        cli.py notes list
        cli.py notes list --sort date --search milk
    """
    service = get_note_service()
    if sort is not None:
        service.sort_option = sort
    service.search_text = search

    notes = service.displayed()
    if not notes:
        console.print("[dim]No notes.[/dim]")
        return

    console.print(_notes_table(notes, f"Notes (by {service.sort_option.label})"))


@app.command()
def show(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """Show one note in full."""
    note = get_note_service().get(note_id)
    if note is None:
        console.print(f"[red]Note not found: {note_id}[/red]")
        raise typer.Exit(1)

    lines = [f"[dim]Created {_format(note.date)}[/dim]"]
    if note.reminder_date is not None:
        lines.append(f"[yellow]Reminder {_format(note.reminder_date)}[/yellow]")
    lines.append("")
    lines.append(note.content)
    console.print(Panel("\n".join(lines), title=note.title, subtitle=str(note.id)))


@app.command()
def add(
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Option("", "--content", "-c", help="Note content"),
    remind: Optional[str] = typer.Option(None, "--remind", "-r", help="Reminder time, YYYY-MM-DD HH:MM"),
) -> None:
    """
    Add a note, optionally with a reminder.

    Examples:
        cli.py notes add Groceries -c "milk, eggs"
        cli.py notes add Taxes -r "2026-04-01 09:00"
    """
    try:
        session = EditSession(get_note_service())
        session.title = title
        session.content = content
        if remind is not None:
            session.set_reminder(_parse_when(remind))
        note = session.save()
    except ApplicationError as e:
        _fail(e)

    console.print(f"[green]Added[/green] {note.title} [dim]{note.id}[/dim]")


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
    remind: Optional[str] = typer.Option(None, "--remind", "-r", help="Reminder time, YYYY-MM-DD HH:MM"),
    clear_reminder: bool = typer.Option(False, "--clear-reminder", help="Remove the reminder date"),
) -> None:
    """
    Edit a note. Omitted fields keep their current value.

    Saving a note that has a reminder re-registers the reminder.
    """
    service = get_note_service()
    note = service.get(note_id)
    if note is None:
        console.print(f"[red]Note not found: {note_id}[/red]")
        raise typer.Exit(1)

    try:
        session = EditSession(service, note)
        if title is not None:
            session.title = title
        if content is not None:
            session.content = content
        if clear_reminder:
            session.clear_reminder()
        elif remind is not None:
            session.set_reminder(_parse_when(remind))
        note = session.save()
    except ApplicationError as e:
        _fail(e)

    console.print(f"[green]Saved[/green] {note.title} [dim]{note.id}[/dim]")


@app.command()
def delete(
    positions: List[int] = typer.Argument(..., help="Positions shown by 'notes list' with the same options"),
    sort: Optional[SortOption] = typer.Option(None, "--sort", "-s", help="Order by title or date"),
    search: str = typer.Option("", "--search", "-q", help="Search text used for the listing"),
) -> None:
    """
    Delete notes by their position in the listing.

    Pass the same --sort and --search used for 'notes list' so the
    positions refer to the same notes.

    Examples:
        cli.py notes delete 0
        cli.py notes delete 0 2 --sort date --search milk
    """
    service = get_note_service()
    if sort is not None:
        service.sort_option = sort
    service.search_text = search

    try:
        removed = service.delete(positions)
    except ApplicationError as e:
        _fail(e)

    for note in removed:
        console.print(f"[green]Deleted[/green] {note.title} [dim]{note.id}[/dim]")
