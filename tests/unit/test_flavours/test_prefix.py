"""Tests for Windows prefix recognition."""

import pytest

from pathslash.flavours.prefix import Prefix, PrefixKind, parse_prefix


class TestParsePrefix:
    """Test parse_prefix function."""

    @pytest.mark.parametrize(
        "text, kind, prefix",
        [
            ("C:", PrefixKind.DISK, "C:"),
            ("C:\\foo\\bar", PrefixKind.DISK, "C:"),
            ("d:foo", PrefixKind.DISK, "d:"),
            ("C:/foo", PrefixKind.DISK, "C:"),
            ("\\\\server\\share", PrefixKind.UNC, "\\\\server\\share"),
            ("\\\\server\\share\\foo", PrefixKind.UNC, "\\\\server\\share"),
            ("\\\\server\\share/foo/bar", PrefixKind.UNC, "\\\\server\\share"),
            ("\\\\server/share/foo", PrefixKind.UNC, "\\\\server/share"),
            ("\\\\server", PrefixKind.UNC, "\\\\server"),
            ("\\\\?\\C:\\foo", PrefixKind.VERBATIM_DISK, "\\\\?\\C:"),
            ("\\\\?\\C:/foo/bar", PrefixKind.VERBATIM_DISK, "\\\\?\\C:"),
            (
                "\\\\?\\UNC\\server\\share\\foo",
                PrefixKind.VERBATIM_UNC,
                "\\\\?\\UNC\\server\\share",
            ),
            (
                "\\\\?\\UNC\\server\\share/foo/bar",
                PrefixKind.VERBATIM_UNC,
                "\\\\?\\UNC\\server\\share",
            ),
            ("\\\\?\\pictures\\kittens", PrefixKind.VERBATIM, "\\\\?\\pictures"),
            ("\\\\.\\COM1", PrefixKind.DEVICE_NS, "\\\\.\\COM1"),
            ("\\\\.\\PhysicalDrive0\\x", PrefixKind.DEVICE_NS, "\\\\.\\PhysicalDrive0"),
        ],
    )
    def test_recognizes_prefix(self, text: str, kind: PrefixKind, prefix: str) -> None:
        """Should recognize each prefix form and cover exactly its text."""
        result = parse_prefix(text)

        assert result == Prefix(kind, prefix)
        assert len(result) == len(prefix)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "foo\\bar",
            "\\foo",
            "/foo",
            "//server/share",
            "\\\\",
            "\\\\\\foo",
            "1:\\foo",
            "é:\\foo",
            ":",
        ],
    )
    def test_no_prefix(self, text: str) -> None:
        """Should return None for paths without a prefix."""
        assert parse_prefix(text) is None


class TestPrefix:
    """Test Prefix dataclass."""

    @pytest.mark.parametrize(
        "kind, verbatim",
        [
            (PrefixKind.VERBATIM, True),
            (PrefixKind.VERBATIM_UNC, True),
            (PrefixKind.VERBATIM_DISK, True),
            (PrefixKind.DEVICE_NS, False),
            (PrefixKind.UNC, False),
            (PrefixKind.DISK, False),
        ],
    )
    def test_is_verbatim(self, kind: PrefixKind, verbatim: bool) -> None:
        """Only the \\\\?\\ forms are verbatim."""
        assert Prefix(kind, "x").is_verbatim is verbatim

    def test_is_frozen(self) -> None:
        """Prefix should be immutable."""
        prefix = Prefix(PrefixKind.DISK, "C:")
        with pytest.raises(AttributeError):
            prefix.text = "D:"  # type: ignore[misc]

    def test_kind_values(self) -> None:
        """PrefixKind should compare equal to its string value."""
        assert PrefixKind.UNC == "unc"
        assert PrefixKind.VERBATIM_DISK == "verbatim_disk"
