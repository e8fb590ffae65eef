"""
CLI Commands.

Organized by domain/feature area.
"""

from modules.cli.commands.notes import app as notes_app
from modules.cli.commands.reminders import app as reminders_app
from modules.cli.commands.system import app as system_app

__all__ = [
    "notes_app",
    "reminders_app",
    "system_app",
]
