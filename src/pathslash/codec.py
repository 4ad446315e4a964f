"""Native path encoding helpers.

Python carries undecodable filesystem bytes inside ``str`` as
surrogate escapes (PEP 383). These helpers decide whether a
native value is valid text and, for lossy conversions, replace
whatever is not with U+FFFD.
"""

import sys

REPLACEMENT_CHARACTER = "\ufffd"


def native_encoding() -> str:
    """Return the encoding the platform uses for file names."""
    return sys.getfilesystemencoding()


def decode_strict(raw: bytes, encoding: str) -> str | None:
    """
    Decode native bytes, refusing invalid sequences.

    Args:
        raw: Native-encoded path bytes.
        encoding: Codec name.

    Returns:
        Decoded text, or None if any sequence is invalid.
    """
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        return None


def decode_lossy(raw: bytes, encoding: str) -> str:
    """Decode native bytes, replacing invalid sequences with U+FFFD."""
    return raw.decode(encoding, "replace")


def scrub_strict(text: str) -> str | None:
    """Return text unchanged if it holds no lone surrogates, else None."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text


def scrub_lossy(text: str, encoding: str) -> str:
    """
    Replace lone surrogates in text with U+FFFD.

    Surrogate escapes are turned back into the bytes they stand
    for and decoded with replacement, so one invalid byte sequence
    gives one replacement character where the codec allows it.

    Args:
        text: Native path text.
        encoding: Codec the escapes were produced with.

    Returns:
        Text that is always encodable as UTF-8.
    """
    if scrub_strict(text) is not None:
        return text
    try:
        raw = text.encode(encoding, "surrogateescape")
    except UnicodeEncodeError:
        # Surrogates that are not escapes of undecodable bytes
        return "".join(
            REPLACEMENT_CHARACTER if "\ud800" <= ch <= "\udfff" else ch for ch in text
        )
    return decode_lossy(raw, encoding)
