"""pathslash error types.

All custom exceptions inherit from PathSlashError to allow
catching any pathslash-specific error. Conversions themselves
never raise these: a strict conversion that cannot decode its
input returns None instead.
"""


class PathSlashError(Exception):
    """Base exception for all pathslash errors."""

    pass


class ConfigurationError(PathSlashError):
    """Invalid configuration."""

    pass


class UnknownFlavourError(ConfigurationError):
    """Requested path flavour does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown path flavour: {name!r}")
        self.name = name
