"""
CLI Module.

Command-line surface for the notes application, built with Typer and Rich.

Architecture:
- CLI is a thin presentation layer
- All behaviour lives in modules/backend/services
- Each invocation loads the collection, runs one operation, and exits

Usage:
    python cli.py --help
    python cli.py notes list --sort date --search milk
    python cli.py reminders due
"""
