"""pathslash utility modules."""

from pathslash.utils.logging import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
