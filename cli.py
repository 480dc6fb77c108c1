#!/usr/bin/env python3
"""
notafacil CLI entry point.

Equivalent to the installed `notafacil` command:

    python cli.py --help
    python cli.py notes export -o notes.json
"""

from notafacil.cli.main import app

if __name__ == "__main__":
    app()
