"""
Logging utilities for the tagblocks library.

Every module logs through a child of the ``hother.tagblocks`` logger, so the
library's scan events can be tuned separately from the application's level.
"""

import logging
import sys

import structlog

LIBRARY_LOGGER = "hother.tagblocks"


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name

    Returns:
        A structlog bound logger
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", LIBRARY_LOGGER)
        else:
            name = LIBRARY_LOGGER

    return structlog.get_logger(name)


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    dev_mode: bool = True,
    library_level: str | None = "WARNING",
) -> None:
    """
    Configure structured logging.

    Args:
        log_level: Root logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render events as JSON lines
        dev_mode: Use the colored console renderer when not emitting JSON
        library_level: Level for ``hother.tagblocks`` loggers; every scan logs a
            debug event, so this defaults to WARNING. None inherits log_level.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if library_level is None:
        library_logger.setLevel(logging.NOTSET)
    else:
        library_logger.setLevel(getattr(logging, library_level.upper()))

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    elif dev_mode:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["event", "logger", "level"])

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
