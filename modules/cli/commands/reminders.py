"""
Reminder Commands.

Inspect and deliver pending reminder notifications.
"""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from modules.backend.core.config import get_display_timezone
from modules.backend.core.dependencies import get_notification_center
from modules.backend.core.exceptions import ApplicationError
from modules.backend.core.utils import to_display, utc_now

app = typer.Typer(help="Reminder commands")
console = Console()


@app.command("list")
def list_reminders() -> None:
    """List pending reminders, soonest first."""
    center = get_notification_center()
    try:
        pending = center.pending()
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if not pending:
        console.print("[dim]No pending reminders.[/dim]")
        return

    tz = get_display_timezone()
    table = Table(title="Pending Reminders", show_header=True)
    table.add_column("When", style="yellow")
    table.add_column("Message")
    table.add_column("Note ID", style="dim")

    for request in pending:
        when = to_display(request.trigger.fire_date(tz), tz)
        table.add_row(when.strftime("%Y-%m-%d %H:%M"), request.content.body, request.identifier)

    console.print(table)


@app.command()
def due() -> None:
    """
    Deliver every reminder whose time has come.

    Delivered reminders are removed from the pending list.
    """
    center = get_notification_center()
    try:
        delivered = center.deliver_due(utc_now())
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if not delivered:
        console.print("[dim]Nothing due.[/dim]")
        return

    for request in delivered:
        console.print(Panel(request.content.body, title=request.content.title))


@app.command()
def cancel(note_id: str = typer.Argument(..., help="Note ID whose reminder to cancel")) -> None:
    """Cancel a pending reminder, including one left behind by a deleted note."""
    try:
        removed = get_notification_center().remove(note_id)
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if not removed:
        console.print(f"[yellow]No pending reminder for {note_id}[/yellow]")
        raise typer.Exit(1)

    console.print(f"[green]Cancelled[/green] reminder for {note_id}")
