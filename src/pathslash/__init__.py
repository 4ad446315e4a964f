"""pathslash: convert file paths to and from slash paths.

A slash path separates its components with ``/`` whatever the
platform, which makes it suitable for config files, manifests
and cross-platform protocols.
"""

from loguru import logger

from pathslash.config import PathSlashConfig, load_config
from pathslash.converter import (
    SlashConverter,
    configure,
    from_backslash,
    from_backslash_lossy,
    from_slash,
    from_slash_lossy,
    from_slash_path,
    get_converter,
    to_slash,
    to_slash_lossy,
)
from pathslash.errors import ConfigurationError, PathSlashError, UnknownFlavourError
from pathslash.flavours import POSIX, WINDOWS, get_flavour, native_flavour

__version__ = "0.1.0"

# Silent until the application calls configure_logging()
logger.disable("pathslash")

__all__ = [
    "POSIX",
    "WINDOWS",
    "ConfigurationError",
    "PathSlashConfig",
    "PathSlashError",
    "SlashConverter",
    "UnknownFlavourError",
    "__version__",
    "configure",
    "from_backslash",
    "from_backslash_lossy",
    "from_slash",
    "from_slash_lossy",
    "from_slash_path",
    "get_converter",
    "get_flavour",
    "load_config",
    "native_flavour",
    "to_slash",
    "to_slash_lossy",
]
