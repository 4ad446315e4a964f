"""Windows path prefix recognition.

A backslash-native path may start with a prefix that is not a
regular component: a drive (``C:``), a UNC share (``\\\\server\\share``)
or one of the device and verbatim forms. Converters copy the
prefix verbatim and only substitute separators after it.
"""

from dataclasses import dataclass
from enum import StrEnum

_SEPARATORS = ("\\", "/")


class PrefixKind(StrEnum):
    """Kinds of Windows path prefix."""

    VERBATIM = "verbatim"
    VERBATIM_UNC = "verbatim_unc"
    VERBATIM_DISK = "verbatim_disk"
    DEVICE_NS = "device_ns"
    UNC = "unc"
    DISK = "disk"


@dataclass(frozen=True)
class Prefix:
    """A recognized prefix and the exact text it covers."""

    kind: PrefixKind
    text: str

    @property
    def is_verbatim(self) -> bool:
        """True for the ``\\\\?\\`` forms, which disable path parsing."""
        return self.kind in (
            PrefixKind.VERBATIM,
            PrefixKind.VERBATIM_UNC,
            PrefixKind.VERBATIM_DISK,
        )

    def __len__(self) -> int:
        return len(self.text)


def _next_separator(text: str, start: int) -> int:
    """Index of the first separator at or after start, or len(text)."""
    for i in range(start, len(text)):
        if text[i] in _SEPARATORS:
            return i
    return len(text)


def _two_components_end(text: str, start: int) -> int:
    """End index of ``server[sep share]`` beginning at start."""
    server_end = _next_separator(text, start)
    if server_end == len(text):
        return server_end
    return _next_separator(text, server_end + 1)


def _is_drive(text: str, start: int) -> bool:
    return (
        len(text) >= start + 2
        and text[start].isascii()
        and text[start].isalpha()
        and text[start + 1] == ":"
    )


def parse_prefix(text: str) -> Prefix | None:
    """
    Recognize the prefix at the start of a Windows path.

    The leading markers must be written with backslashes; the
    components inside the prefix end at either separator, so the
    same prefix is found in native text and in slash text.

    Args:
        text: Path text in native or slash form.

    Returns:
        The recognized Prefix, or None when the path has none.
    """
    if text.startswith("\\\\?\\"):
        if text.startswith("UNC\\", 4):
            return Prefix(PrefixKind.VERBATIM_UNC, text[: _two_components_end(text, 8)])
        if _is_drive(text, 4):
            return Prefix(PrefixKind.VERBATIM_DISK, text[:6])
        return Prefix(PrefixKind.VERBATIM, text[: _next_separator(text, 4)])

    if text.startswith("\\\\.\\"):
        return Prefix(PrefixKind.DEVICE_NS, text[: _next_separator(text, 4)])

    if text.startswith("\\\\"):
        # An empty server name is not a share
        if len(text) == 2 or text[2] in _SEPARATORS:
            return None
        return Prefix(PrefixKind.UNC, text[: _two_components_end(text, 2)])

    if _is_drive(text, 0):
        return Prefix(PrefixKind.DISK, text[:2])

    return None
