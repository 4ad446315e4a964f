"""Logging configuration using loguru.

The package disables its own loguru namespace on import so that
applications embedding it see nothing until they opt in through
configure_logging(). Sinks added here only receive records from the
pathslash namespace; sinks and handlers owned by the host
application, loguru or standard library, are left alone.
"""

import sys
from typing import Any

from loguru import logger

from pathslash.config.models import LoggingConfig

PACKAGE = "pathslash"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Handler ids of the sinks installed by configure_logging()
_handler_ids: list[int] = []


def reset_logging() -> None:
    """Remove the sinks added by configure_logging() and silence the package."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable(PACKAGE)


def configure_logging(config: LoggingConfig) -> list[int]:
    """
    Send pathslash log records to stderr and, optionally, a file.

    Calling it again replaces the sinks from the previous call.

    Args:
        config: LoggingConfig with level, format, and file settings.

    Returns:
        Handler ids of the new sinks.
    """
    reset_logging()

    serialize = config.format == "json"
    fmt = "{message}" if serialize else CONSOLE_FORMAT

    _handler_ids.append(
        logger.add(
            sys.stderr,
            format=fmt,
            level=config.level,
            filter=PACKAGE,
            serialize=serialize,
            colorize=not serialize,
        )
    )

    if config.file:
        _handler_ids.append(
            logger.add(
                config.file,
                format=fmt,
                level=config.level,
                filter=PACKAGE,
                serialize=serialize,
                rotation=config.rotation,
                retention=config.retention,
                compression="gz",
            )
        )

    logger.enable(PACKAGE)
    logger.debug("Logging configured: level={} format={}", config.level, config.format)
    return list(_handler_ids)


def get_logger(name: str) -> Any:
    """
    Get a logger instance with context.

    Args:
        name: Logger name (typically module name).

    Returns:
        Configured logger instance.
    """
    return logger.bind(name=name)
