"""Port interface for path flavours."""

from pathlib import PurePath
from typing import Protocol


class FlavourPort(Protocol):
    """Protocol for a platform path convention.

    Every platform-dependent decision the converter makes goes
    through this interface, so the substitution routine is the
    same for both implementations.
    """

    name: str
    sep: str
    altsep: str | None
    pure_path_class: type[PurePath]

    def prefix_length(self, text: str) -> int:
        """Length of the leading prefix that must be copied verbatim.

        Args:
            text: Native or slash path text

        Returns:
            Number of leading characters belonging to the prefix,
            0 when there is none
        """
        ...
