"""Logging configuration using structlog."""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from repeater.config import Settings, settings as default_settings

PROJECT_ROOT = Path(__file__).resolve().parents[2]

_configured = False


def _build_handlers(config: Settings) -> list[logging.Handler]:
    """Stdout always; a log file when a directory is configured."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_directory:
        log_dir = Path(config.log_directory)
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / config.log_file_name, encoding="utf-8")
        )

    return handlers


def configure_logging(config: Settings | None = None, force: bool = False) -> None:
    """Configure structured logging for the service.

    Safe to call more than once; later calls are ignored unless ``force`` is set.
    """
    global _configured
    if _configured and not force:
        return

    config = config or default_settings

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, config.log_level),
        handlers=_build_handlers(config),
        force=force,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == "json":
        # Styled output is mostly emoji; keep it readable in the log file
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=config.is_development))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
