"""
Structured logging configuration for rn-semver-sync.

Uses structlog for key-value logging, rendered through the standard library
logger and a rich handler on stderr so that the command-line summary on stdout
stays clean. Console lines on a terminal, JSON lines in CI.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Callable

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config


def setup_logging(config: Config | None = None, verbose: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        config: Optional configuration. If None, uses WARNING level.
        verbose: Force DEBUG level regardless of the configured level.
    """
    log_level = "DEBUG" if verbose else (config.log_level if config else "WARNING")
    level = getattr(logging, log_level, logging.WARNING)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
    ]

    if sys.stderr.isatty():
        renderers: list[structlog.types.Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


def progress_method(logger: Any, verbose: bool) -> Callable[..., Any]:
    """Pick the log method for per-run progress lines.

    Verbose runs report progress at INFO, quiet runs at DEBUG.
    """
    return logger.info if verbose else logger.debug


def bound_context(**kwargs: object) -> AbstractContextManager[None]:
    """Bind context variables to log entries emitted inside a ``with`` block.

    Variables bound by the caller before entering are restored on exit.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
