"""Separator conversion between native paths and slash paths.

A slash path separates components with ``/`` on every platform.
Conversions only substitute separators: repeated separators,
trailing separators, ``.`` and ``..`` components and letter case
all pass through untouched.

Whenever nothing has to be substituted the input object itself
is returned, so callers may rely on ``result is value`` as the
no-copy case. Results that differ from the input are new objects.
"""

import codecs
import os
from functools import lru_cache
from pathlib import PurePath
from typing import Any, AnyStr, TypeAlias

from loguru import logger

from pathslash.codec import (
    decode_lossy,
    decode_strict,
    native_encoding,
    scrub_lossy,
    scrub_strict,
)
from pathslash.config.models import ConversionConfig, PathSlashConfig
from pathslash.errors import ConfigurationError
from pathslash.flavours import POSIX, WINDOWS, get_flavour
from pathslash.ports.flavour import FlavourPort

NativePath: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]
FlavourArg: TypeAlias = FlavourPort | str | None

SLASH = "/"
BACKSLASH = "\\"


def _replace_separators(value: AnyStr, old: str, new: str, start: int) -> AnyStr:
    """Substitute old with new in value[start:], keeping value[:start] verbatim."""
    if old == new:
        return value

    old_unit: Any = old
    new_unit: Any = new
    if isinstance(value, bytes):
        old_unit = old.encode("ascii")
        new_unit = new.encode("ascii")

    tail = value[start:]
    if old_unit not in tail:
        return value
    return value[:start] + tail.replace(old_unit, new_unit)


def _require_text(value: object, operation: str) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(
        f"{operation}() expects str, not {type(value).__name__}; "
        f"use {operation}_lossy() for native bytes"
    )


class SlashConverter:
    """Converts paths for one flavour and one native encoding.

    Instances hold no mutable state and can be shared between
    threads freely.
    """

    def __init__(self, flavour: FlavourArg = None, encoding: str | None = None) -> None:
        """Initialize converter.

        Args:
            flavour: Flavour object or name; None means the native flavour.
            encoding: Native encoding of byte paths; None means the
                filesystem encoding of the running interpreter.

        Raises:
            ConfigurationError: If the flavour or encoding is unknown.
        """
        if flavour is None or isinstance(flavour, str):
            flavour = get_flavour(flavour or "auto")
        self.flavour: FlavourPort = flavour

        name = encoding or native_encoding()
        try:
            self.encoding = codecs.lookup(name).name
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {name}") from e

    @classmethod
    def from_config(cls, config: ConversionConfig) -> "SlashConverter":
        """Build a converter from conversion settings."""
        return cls(flavour=config.flavour, encoding=config.encoding)

    def __repr__(self) -> str:
        return f"SlashConverter(flavour={self.flavour.name!r}, encoding={self.encoding!r})"

    def _slash_text(self, text: str) -> str:
        start = self.flavour.prefix_length(text)
        return _replace_separators(text, self.flavour.sep, SLASH, start)

    def to_slash(self, native_path: NativePath) -> str | None:
        """
        Convert a native path to a slash path.

        Every native separator after the prefix becomes ``/``.
        A recognized prefix (drive letter, UNC share) is kept as is.

        Args:
            native_path: Native path as str, bytes or path-like object.

        Returns:
            The slash path, or None when the native path is not valid
            text in the native encoding.
        """
        value = os.fspath(native_path)
        if isinstance(value, bytes):
            text = decode_strict(value, self.encoding)
        else:
            text = scrub_strict(value)

        if text is None:
            logger.debug("Path is not valid {} text: {!r}", self.encoding, value)
            return None
        return self._slash_text(text)

    def to_slash_lossy(self, native_path: NativePath) -> str:
        """
        Convert a native path to a slash path, never failing.

        Undecodable sequences are replaced with U+FFFD before
        separators are substituted.

        Args:
            native_path: Native path as str, bytes or path-like object.

        Returns:
            The slash path.
        """
        value = os.fspath(native_path)
        if isinstance(value, bytes):
            text = decode_lossy(value, self.encoding)
        else:
            text = scrub_lossy(value, self.encoding)
        return self._slash_text(text)

    def from_slash(self, s: str) -> str:
        """
        Convert a slash path to a native path.

        Every ``/`` becomes the native separator, including any inside
        a drive or UNC prefix, so ``//server/share/x`` and
        ``\\\\?\\UNC\\server/share`` come out with backslashes only.
        On posix this returns s itself.

        Args:
            s: Slash path text.

        Returns:
            The native path.
        """
        s = _require_text(s, "from_slash")
        return _replace_separators(s, SLASH, self.flavour.sep, 0)

    def from_slash_lossy(self, raw: AnyStr | os.PathLike[AnyStr]) -> AnyStr:
        """
        Convert a native-encoded slash path to a native path.

        Only separator bytes are touched. The input is never decoded,
        so sequences that are invalid in the native encoding pass
        through unchanged. Bytes in, bytes out.

        Args:
            raw: Slash path as bytes (or str).

        Returns:
            The native path, of the same type as the input.
        """
        return _replace_separators(os.fspath(raw), SLASH, self.flavour.sep, 0)

    def from_backslash(self, s: str) -> str:
        """
        Convert a backslash-separated path to a native path.

        Use this for text known to be written with ``\\`` separators,
        such as Windows-authored data read on posix. On windows this
        returns s itself.

        Args:
            s: Backslash path text.

        Returns:
            The native path.
        """
        s = _require_text(s, "from_backslash")
        return _replace_separators(s, BACKSLASH, self.flavour.sep, 0)

    def from_backslash_lossy(self, raw: AnyStr | os.PathLike[AnyStr]) -> AnyStr:
        """Byte-level variant of from_backslash; see from_slash_lossy."""
        return _replace_separators(os.fspath(raw), BACKSLASH, self.flavour.sep, 0)

    def from_slash_path(self, s: str) -> PurePath:
        """
        Convert a slash path to a pure path of this flavour.

        Unlike the string conversions, the result goes through
        pathlib, which drops repeated and trailing separators
        and single-dot components.

        Args:
            s: Slash path text.

        Returns:
            PurePosixPath or PureWindowsPath.
        """
        return self.flavour.pure_path_class(self.from_slash(s))


_default_converter: SlashConverter | None = None


def get_converter() -> SlashConverter:
    """Return the converter used by the module-level functions."""
    global _default_converter
    if _default_converter is None:
        _default_converter = SlashConverter()
    return _default_converter


def configure(
    config: PathSlashConfig | ConversionConfig | None = None,
    *,
    setup_logging: bool = False,
) -> SlashConverter:
    """
    Install the default converter from configuration.

    Args:
        config: Root or conversion config; None re-reads the
            environment through PathSlashConfig.
        setup_logging: Also apply the logging section of a root config.

    Returns:
        The newly installed converter.

    Raises:
        ConfigurationError: If the configured encoding is unknown.
    """
    global _default_converter
    if config is None:
        config = PathSlashConfig()

    if isinstance(config, PathSlashConfig):
        if setup_logging:
            from pathslash.utils.logging import configure_logging

            configure_logging(config.logging)
        conversion = config.conversion
    else:
        conversion = config

    converter = SlashConverter.from_config(conversion)
    _default_converter = converter
    _converter_for.cache_clear()
    logger.info("Default converter set: {!r}", converter)
    return converter


@lru_cache(maxsize=8)
def _converter_for(flavour: FlavourPort | str, encoding: str) -> SlashConverter:
    return SlashConverter(flavour=flavour, encoding=encoding)


def _resolve(flavour: FlavourArg) -> SlashConverter:
    default = get_converter()
    if flavour is None:
        return default
    if isinstance(flavour, str) or flavour is POSIX or flavour is WINDOWS:
        return _converter_for(flavour, default.encoding)
    # Caller-defined flavours need not be hashable
    return SlashConverter(flavour=flavour, encoding=default.encoding)


def to_slash(native_path: NativePath, *, flavour: FlavourArg = None) -> str | None:
    """Convert a native path to a slash path; None if it is not valid text."""
    return _resolve(flavour).to_slash(native_path)


def to_slash_lossy(native_path: NativePath, *, flavour: FlavourArg = None) -> str:
    """Convert a native path to a slash path, replacing undecodable sequences."""
    return _resolve(flavour).to_slash_lossy(native_path)


def from_slash(s: str, *, flavour: FlavourArg = None) -> str:
    """Convert a slash path to a native path."""
    return _resolve(flavour).from_slash(s)


def from_slash_lossy(
    raw: AnyStr | os.PathLike[AnyStr], *, flavour: FlavourArg = None
) -> AnyStr:
    """Convert a native-encoded slash path to a native path, bytes in, bytes out."""
    return _resolve(flavour).from_slash_lossy(raw)


def from_backslash(s: str, *, flavour: FlavourArg = None) -> str:
    """Convert a backslash-separated path to a native path."""
    return _resolve(flavour).from_backslash(s)


def from_backslash_lossy(
    raw: AnyStr | os.PathLike[AnyStr], *, flavour: FlavourArg = None
) -> AnyStr:
    """Convert a native-encoded backslash path to a native path."""
    return _resolve(flavour).from_backslash_lossy(raw)


def from_slash_path(s: str, *, flavour: FlavourArg = None) -> PurePath:
    """Convert a slash path to a pure path of the flavour."""
    return _resolve(flavour).from_slash_path(s)
