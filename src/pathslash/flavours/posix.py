"""Slash-native path flavour."""

from pathlib import PurePath, PurePosixPath


class PosixFlavour:
    """Paths separated by ``/`` with no prefix forms."""

    name = "posix"
    sep = "/"
    altsep: str | None = None
    pure_path_class: type[PurePath] = PurePosixPath

    def prefix_length(self, text: str) -> int:
        return 0

    def __repr__(self) -> str:
        return "PosixFlavour()"
