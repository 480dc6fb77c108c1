"""
CLI Commands.

Organized by domain/feature area.
"""

from notafacil.cli.commands.db import app as db_app
from notafacil.cli.commands.health import app as health_app
from notafacil.cli.commands.notes import app as notes_app
from notafacil.cli.commands.server import app as server_app
from notafacil.cli.commands.system import app as system_app

__all__ = [
    "db_app",
    "health_app",
    "notes_app",
    "server_app",
    "system_app",
]
