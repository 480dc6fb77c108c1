"""
CLI Module.

Command-line interface built with Typer and Rich.

Architecture:
- Database and note commands work directly against the configured database
- Health commands call the running backend over HTTP (httpx)
- HTTP requests send X-Frontend-ID: cli for log routing

Usage:
    notafacil --help
    notafacil notes export --output notes.json
    notafacil health status
"""
