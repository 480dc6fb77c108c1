"""
Logging.

structlog on top of the stdlib root logger, configured from
config/settings/logging.yaml. Every module gets its logger from
`get_logger(__name__)`; nothing else attaches handlers.

JSON records carry: timestamp, level, logger, event, func_name, lineno,
plus whatever the middleware binds for the request (request_id, frontend,
method, path) and `source` when it is given explicitly.

    setup_logging()                        # from logging.yaml
    setup_logging(level="DEBUG", format_type="console")

    logger = get_logger(__name__)
    logger.info("Notes imported", extra={"imported": 3})
    log_with_source(logger, "cli", "info", "Export written", path="notes.json")

With file output on, every record also goes to a rotating JSONL file
(logs/system.jsonl by default).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TypeVar

import structlog
from structlog.typing import Processor

from notafacil.backend.core.config import find_project_root, load_yaml_config
from notafacil.backend.core.config_schema import FileHandlerSchema, LoggingSchema

VALID_SOURCES = frozenset({"web", "cli", "api", "internal", "unknown"})

# Third-party loggers that are too chatty below WARNING
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")

T = TypeVar("T")

_logging_config: LoggingSchema | None = None


def _load_logging_config() -> LoggingSchema:
    """Read and validate logging.yaml, once per process."""
    global _logging_config
    if _logging_config is None:
        _logging_config = LoggingSchema(**load_yaml_config("logging.yaml"))
    return _logging_config


def _resolve_log_path(configured_path: str) -> Path:
    return find_project_root() / configured_path


def _override(value: T | None, default: T) -> T:
    return default if value is None else value


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor, pre_chain: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _file_handler(file_config: FileHandlerSchema, formatter: logging.Formatter) -> logging.Handler:
    log_path = _resolve_log_path(file_config.path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Arguments left as None take their value from logging.yaml. Calling
    this again replaces the handlers installed by the previous call.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'json' or 'console' for the console handler
        enable_console: Write records to stdout
        enable_file_logging: Write records to the rotating JSONL file
    """
    config = _load_logging_config()
    handlers = config.handlers

    pre_chain = _shared_processors()
    json_formatter = _formatter(structlog.processors.JSONRenderer(), pre_chain)
    if _override(format_type, config.format) == "console":
        console_formatter = _formatter(structlog.dev.ConsoleRenderer(colors=True), pre_chain)
    else:
        console_formatter = json_formatter

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, _override(level, config.level).upper()))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if _override(enable_console, handlers.console.enabled):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        root.addHandler(console_handler)

    if _override(enable_file_logging, handlers.file.enabled):
        root.addHandler(_file_handler(handlers.file, json_formatter))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return the structlog logger for a module, usually `get_logger(__name__)`."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log with an explicit `source` field.

    Used where no request context exists to tell where a record came
    from, e.g. CLI commands.

    Raises:
        ValueError: If source is not in VALID_SOURCES
        AttributeError: If level is not a logger method
    """
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source!r}")
    getattr(logger, level.lower())(message, source=source, **kwargs)
