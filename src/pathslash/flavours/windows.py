"""Backslash-native path flavour."""

from pathlib import PurePath, PureWindowsPath

from pathslash.flavours.prefix import parse_prefix


class WindowsFlavour:
    """Paths separated by ``\\``, also accepting ``/``.

    Drive letters, UNC shares and the device and verbatim forms
    are recognized as prefixes and kept intact by the converter.
    """

    name = "windows"
    sep = "\\"
    altsep: str | None = "/"
    pure_path_class: type[PurePath] = PureWindowsPath

    def prefix_length(self, text: str) -> int:
        """Length of the drive, UNC, device or verbatim prefix of text."""
        prefix = parse_prefix(text)
        return len(prefix) if prefix is not None else 0

    def __repr__(self) -> str:
        return "WindowsFlavour()"
