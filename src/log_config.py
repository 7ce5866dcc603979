"""Structured logging setup for the relation graph library.

Library modules log through ``structlog.get_logger(__name__)`` with
snake_case event names and keyword context. Applications decide how those
events are rendered by calling :func:`configure_logging` (or
:func:`configure_from_config` with the ``logging`` section of the loaded
configuration) once at start-up.

Example:
    >>> from src.log_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> get_logger(__name__).debug("traversal_completed", algorithm="bfs", visited=3)
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from src.config import LoggingConfig

# Module, function and line of the call that emitted the event
CALLSITE_PARAMETERS = (
    structlog.processors.CallsiteParameter.MODULE,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
)


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Route structlog events through the standard library at ``level``.

    Args:
        level: Logging level name, case-insensitive (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines; otherwise colored console output

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(parameters=list(CALLSITE_PARAMETERS)),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(json_logs),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_config(config: "LoggingConfig") -> None:
    """Apply a validated ``LoggingConfig`` section."""
    configure_logging(level=config.level, json_logs=config.json_logs)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Tag every following event in this context with ``correlation_id``.

    The demo binds the name of the graph being analysed so the relation
    properties, traversal orders and validation result can be grouped.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
