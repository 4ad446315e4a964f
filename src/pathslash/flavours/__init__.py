"""Platform path flavours.

Exactly two conventions exist: slash-native (posix) and
backslash-native (windows). Everything else in the package is
written against FlavourPort.
"""

import os

from pathslash.errors import UnknownFlavourError
from pathslash.flavours.posix import PosixFlavour
from pathslash.flavours.prefix import Prefix, PrefixKind, parse_prefix
from pathslash.flavours.windows import WindowsFlavour
from pathslash.ports.flavour import FlavourPort

POSIX = PosixFlavour()
WINDOWS = WindowsFlavour()

_BY_NAME: dict[str, FlavourPort] = {
    POSIX.name: POSIX,
    WINDOWS.name: WINDOWS,
}


def native_flavour() -> FlavourPort:
    """Return the flavour of the running interpreter."""
    return WINDOWS if os.sep == "\\" else POSIX


def get_flavour(name: str) -> FlavourPort:
    """
    Resolve a flavour by name.

    Args:
        name: "posix", "windows" or "auto" (case-insensitive).

    Returns:
        The matching flavour; "auto" gives the native one.

    Raises:
        UnknownFlavourError: If the name matches no flavour.
    """
    key = name.strip().lower()
    if key == "auto":
        return native_flavour()
    try:
        return _BY_NAME[key]
    except KeyError:
        raise UnknownFlavourError(name) from None


__all__ = [
    "POSIX",
    "WINDOWS",
    "PosixFlavour",
    "Prefix",
    "PrefixKind",
    "WindowsFlavour",
    "get_flavour",
    "native_flavour",
    "parse_prefix",
]
