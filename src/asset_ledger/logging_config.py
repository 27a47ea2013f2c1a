"""Structured logging for the CSV engine and CLI, built on structlog.

Events are snake_case names with keyword fields, for example
``csv_import_finished accepted=12 duplicates=0``. Output goes to stderr:
human-readable in development, one JSON object per line in production.
Stdout is left to the CLI, which writes exported CSV there.
"""

import logging
import sys
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from asset_ledger.config import Settings, get_settings


def _add_log_level(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add an upper-case level field for JSON output."""
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def _add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag JSON events with the application name, version and environment."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment.value
    return event_dict


def get_console_processors() -> list[Processor]:
    """Processors for development output; colors only on a terminal."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def get_json_processors() -> list[Processor]:
    """Processors for production output, one JSON object per event."""
    return [
        structlog.contextvars.merge_contextvars,
        _add_log_level,
        _add_app_context,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger from settings.

    The log format follows ``settings.log_format`` and the level follows
    ``settings.log_level``. When ``settings.log_file`` is set, events are
    also appended to that file.

    Args:
        settings: Application settings. If None, loads from environment.
    """
    if settings is None:
        settings = get_settings()

    log_level = getattr(logging, settings.log_level.value)

    if settings.log_format == "json":
        processors = get_json_processors()
    else:
        processors = get_console_processors()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    if settings.log_file:
        _setup_file_handler(settings.log_file, log_level)


def _setup_file_handler(log_file: Path, level: int) -> logging.Handler:
    """Attach a UTF-8 file handler to the root logger and return it."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.getLogger().addHandler(file_handler)
    return file_handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, usually with ``get_logger(__name__)``.

    Example:
        logger = get_logger(__name__)
        logger.info("csv_import_finished", accepted=12, duplicates=0)
    """
    return structlog.stdlib.get_logger(name)


class LogContext:
    """Bind fields to every event logged inside a with block.

    Values bound by an enclosing LogContext are restored on exit, so a
    nested import keeps the outer context intact.

    Example:
        with LogContext(source="bank.csv"):
            service.import_text(text)  # every event carries source=bank.csv
    """

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self._bound: AbstractContextManager[None] | None = None

    def __enter__(self) -> "LogContext":
        self._bound = structlog.contextvars.bound_contextvars(**self.kwargs)
        self._bound.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        if self._bound is not None:
            self._bound.__exit__(*args)
            self._bound = None
