"""
Structured logging configuration using structlog.

capexpand modules log key/value events through structlog, while PuLP and its
solver wrappers log through the standard library. Both streams go through one
stdlib handler on stderr with a shared ProcessorFormatter, so a model run
produces a single consistent log while rich tables keep stdout.
"""

import logging
import sys
from typing import Any

import structlog

# Name of the handler this module installs on the root logger
HANDLER_NAME = "capexpand"

# Standard-library loggers used by the LP layer
SOLVER_LOGGERS: tuple[str, ...] = ("pulp",)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _timestamped() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_output:
        renderer: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_timestamped(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderer,
        ],
    )


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    solver_level: str = "WARNING",
) -> None:
    """
    Configure structured logging for the application.

    Calling it again replaces the previous handler instead of adding one.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output logs as JSON (useful for batch runs).
        solver_level: Minimum level for PuLP's own loggers; they are never
            more verbose than ``level``.
    """
    log_level = _level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_formatter(json_output))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in SOLVER_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, _level(solver_level)))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_timestamped(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Configured structlog logger.
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Context manager for adding context to all logs within the block.

    Example:
        with log_context(project="poland-2023"):
            log.info("Solving model")  # Will include project

    Args:
        **kwargs: Key-value pairs to add to log context.

    Returns:
        Context manager that binds the values.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
