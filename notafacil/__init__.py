"""
notafacil.

- backend/: Note/Tag domain, use cases, persistence, HTTP API, configuration
- cli/: Command-line client (Typer + Rich)
"""
