"""
Application Modules.

- backend/: Note storage, view derivation, reminders, configuration, logging
- cli/: Command-line client (Typer + Rich)
"""
